# norwedfilm/models/media.py
import uuid
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from norwedfilm.db.base_class import Base


class Media(Base):
    __tablename__ = "media"

    id = Column(
        String, primary_key=True, default=lambda: f"med_{uuid.uuid4().hex[:12]}"
    )
    project_id = Column(
        String, ForeignKey("projects.id", ondelete="CASCADE"), nullable=True, index=True
    )
    type = Column(String, nullable=False)  # image, video
    url = Column(String, nullable=False)
    thumbnail_url = Column(String, nullable=True)
    title = Column(String, nullable=True)
    alt = Column(String, nullable=True)
    sort_order = Column(Integer, nullable=False, default=0, server_default=text("0"))
    created_at = Column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    project = relationship("Project", back_populates="media")
