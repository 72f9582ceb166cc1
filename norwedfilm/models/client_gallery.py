# norwedfilm/models/client_gallery.py
import uuid
from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from norwedfilm.db.base_class import Base


class ClientGallery(Base):
    __tablename__ = "client_galleries"

    id = Column(
        String, primary_key=True, default=lambda: f"gal_{uuid.uuid4().hex[:12]}"
    )
    project_id = Column(
        String, ForeignKey("projects.id", ondelete="CASCADE"), nullable=True, index=True
    )
    title = Column(String, nullable=False)
    slug = Column(String, nullable=False, unique=True, index=True)
    password = Column(String, nullable=False)
    client_name = Column(String, nullable=True)
    client_email = Column(String, nullable=True)
    expires_at = Column(DateTime(timezone=True), nullable=True)
    download_enabled = Column(
        Boolean, nullable=False, default=True, server_default=text("true")
    )
    view_count = Column(Integer, nullable=False, default=0, server_default=text("0"))
    created_at = Column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    project = relationship("Project", back_populates="galleries")
