# norwedfilm/models/blocked_date.py
import uuid
from sqlalchemy import Column, Date, DateTime, String
from sqlalchemy.sql import func
from norwedfilm.db.base_class import Base


class BlockedDate(Base):
    __tablename__ = "blocked_dates"

    id = Column(
        String, primary_key=True, default=lambda: f"bd_{uuid.uuid4().hex[:12]}"
    )
    date = Column(Date, nullable=False, index=True)
    reason = Column(String, nullable=True)
    created_at = Column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
