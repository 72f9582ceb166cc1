# norwedfilm/models/contact.py
import uuid
from sqlalchemy import Column, DateTime, String, Text, text
from sqlalchemy.sql import func
from norwedfilm.db.base_class import Base


class Contact(Base):
    __tablename__ = "contacts"

    id = Column(
        String, primary_key=True, default=lambda: f"ct_{uuid.uuid4().hex[:12]}"
    )
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    phone = Column(String, nullable=True)
    event_date = Column(String, nullable=True)
    event_type = Column(String, nullable=True)
    message = Column(Text, nullable=False)
    # new, read, replied, archived
    status = Column(String, nullable=False, default="new", server_default=text("'new'"))
    created_at = Column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
