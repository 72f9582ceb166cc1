# norwedfilm/models/project.py
import uuid
from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text, text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from norwedfilm.db.base_class import Base


class Project(Base):
    __tablename__ = "projects"

    id = Column(
        String, primary_key=True, default=lambda: f"prj_{uuid.uuid4().hex[:12]}"
    )
    title = Column(String, nullable=False)
    slug = Column(String, nullable=False, unique=True, index=True)
    description = Column(Text, nullable=True)
    category = Column(String, nullable=False, index=True)  # wedding-photo, wedding-video
    cover_image = Column(String, nullable=True)
    video_url = Column(String, nullable=True)
    date = Column(String, nullable=True)  # free text, e.g. "June 2024"
    location = Column(String, nullable=True)
    featured = Column(Boolean, nullable=False, default=False, server_default=text("false"))
    published = Column(Boolean, nullable=False, default=True, server_default=text("true"))
    sort_order = Column(Integer, nullable=False, default=0, server_default=text("0"))
    created_at = Column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    # A project owns its media and client galleries.
    media = relationship(
        "Media",
        back_populates="project",
        cascade="all, delete-orphan",
        order_by="Media.sort_order",
    )
    galleries = relationship(
        "ClientGallery", back_populates="project", cascade="all, delete-orphan"
    )
