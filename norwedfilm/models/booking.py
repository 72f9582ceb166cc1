# norwedfilm/models/booking.py
import uuid
from sqlalchemy import Column, Date, DateTime, String, Text, text
from sqlalchemy.sql import func
from norwedfilm.db.base_class import Base


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(
        String, primary_key=True, default=lambda: f"bk_{uuid.uuid4().hex[:12]}"
    )
    date = Column(Date, nullable=False, index=True)
    client_name = Column(String, nullable=False)
    client_email = Column(String, nullable=False)
    client_phone = Column(String, nullable=True)
    event_type = Column(String, nullable=True)
    location = Column(String, nullable=True)
    notes = Column(Text, nullable=True)
    # pending, confirmed, completed, cancelled
    status = Column(
        String, nullable=False, default="pending", server_default=text("'pending'"), index=True
    )
    created_at = Column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
