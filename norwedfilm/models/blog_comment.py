# norwedfilm/models/blog_comment.py
import uuid
from sqlalchemy import Column, DateTime, ForeignKey, String, Text, text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from norwedfilm.db.base_class import Base


class BlogComment(Base):
    __tablename__ = "blog_comments"

    id = Column(
        String, primary_key=True, default=lambda: f"cmt_{uuid.uuid4().hex[:12]}"
    )
    post_id = Column(
        String,
        ForeignKey("blog_posts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    parent_id = Column(
        String,
        ForeignKey("blog_comments.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    author_name = Column(String, nullable=False)
    author_email = Column(String, nullable=True)
    author_url = Column(String, nullable=True)
    content = Column(Text, nullable=False)
    # pending, approved, rejected, spam
    status = Column(
        String, nullable=False, default="pending", server_default=text("'pending'"), index=True
    )
    ip_address = Column(String, nullable=True)
    user_agent = Column(String, nullable=True)
    created_at = Column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    post = relationship("BlogPost", back_populates="comments")
    replies = relationship(
        "BlogComment",
        back_populates="parent",
        cascade="all, delete-orphan",
    )
    parent = relationship("BlogComment", back_populates="replies", remote_side=[id])
