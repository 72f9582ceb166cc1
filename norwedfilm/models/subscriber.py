# norwedfilm/models/subscriber.py
import uuid
from sqlalchemy import Column, DateTime, String, text
from sqlalchemy.sql import func
from norwedfilm.db.base_class import Base


class Subscriber(Base):
    __tablename__ = "subscribers"

    id = Column(
        String, primary_key=True, default=lambda: f"sub_{uuid.uuid4().hex[:12]}"
    )
    email = Column(String, nullable=False, unique=True, index=True)
    name = Column(String, nullable=True)
    # active, unsubscribed
    status = Column(
        String, nullable=False, default="active", server_default=text("'active'")
    )
    source = Column(String, nullable=True)  # where they signed up
    created_at = Column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
