# norwedfilm/models/site_setting.py
import uuid
from sqlalchemy import Column, DateTime, String, Text, text
from sqlalchemy.sql import func
from norwedfilm.db.base_class import Base


class SiteSetting(Base):
    __tablename__ = "site_settings"

    id = Column(
        String, primary_key=True, default=lambda: f"set_{uuid.uuid4().hex[:12]}"
    )
    key = Column(String, nullable=False, unique=True, index=True)
    value = Column(Text, nullable=True)
    # text, image, json, boolean - decides how `value` is read
    type = Column(String, nullable=False, default="text", server_default=text("'text'"))
    created_at = Column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
