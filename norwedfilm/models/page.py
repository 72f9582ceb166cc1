# norwedfilm/models/page.py
import uuid
from sqlalchemy import Boolean, Column, DateTime, String, Text, text
from sqlalchemy.sql import func
from norwedfilm.db.base_class import Base


class Page(Base):
    __tablename__ = "pages"

    id = Column(
        String, primary_key=True, default=lambda: f"pg_{uuid.uuid4().hex[:12]}"
    )
    slug = Column(String, nullable=False, unique=True, index=True)
    title = Column(String, nullable=False)
    content = Column(Text, nullable=True)
    meta_title = Column(String, nullable=True)
    meta_description = Column(String, nullable=True)
    published = Column(Boolean, nullable=False, default=True, server_default=text("true"))
    created_at = Column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
