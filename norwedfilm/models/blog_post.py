# norwedfilm/models/blog_post.py
import uuid
from sqlalchemy import JSON, Boolean, Column, DateTime, String, Text, text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from norwedfilm.db.base_class import Base


class BlogPost(Base):
    __tablename__ = "blog_posts"

    id = Column(
        String, primary_key=True, default=lambda: f"post_{uuid.uuid4().hex[:12]}"
    )
    title = Column(String, nullable=False)
    slug = Column(String, nullable=False, unique=True, index=True)
    excerpt = Column(Text, nullable=True)
    content = Column(Text, nullable=True)
    cover_image = Column(String, nullable=True)
    category = Column(String, nullable=True, index=True)
    tags = Column(JSON().with_variant(JSONB, "postgresql"), nullable=True)
    author = Column(String, nullable=True)
    published = Column(Boolean, nullable=False, default=False, server_default=text("false"))
    featured = Column(Boolean, nullable=False, default=False, server_default=text("false"))
    # Stamped by the CRUD layer on the first transition to published.
    published_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    comments = relationship(
        "BlogComment", back_populates="post", cascade="all, delete-orphan"
    )
