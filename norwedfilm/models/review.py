# norwedfilm/models/review.py
import uuid
from sqlalchemy import (
    Boolean, CheckConstraint, Column, DateTime, Integer, String, Text, text
)
from sqlalchemy.sql import func
from norwedfilm.db.base_class import Base


class Review(Base):
    __tablename__ = "reviews"
    __table_args__ = (
        CheckConstraint("rating BETWEEN 1 AND 5", name="check_review_rating"),
    )

    id = Column(
        String, primary_key=True, default=lambda: f"rev_{uuid.uuid4().hex[:12]}"
    )
    name = Column(String, nullable=False)
    event_type = Column(String, nullable=True)
    event_date = Column(String, nullable=True)
    rating = Column(Integer, nullable=False, default=5, server_default=text("5"))
    content = Column(Text, nullable=False)
    photo = Column(String, nullable=True)
    featured = Column(Boolean, nullable=False, default=False, server_default=text("false"))
    published = Column(Boolean, nullable=False, default=True, server_default=text("true"))
    created_at = Column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
