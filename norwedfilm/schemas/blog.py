from datetime import datetime
from typing import List, Optional

from pydantic import Field

from norwedfilm.constants.statuses import CommentStatus
from norwedfilm.schemas.base import CamelModel


class BlogPostBase(CamelModel):
    excerpt: Optional[str] = None
    content: Optional[str] = None
    cover_image: Optional[str] = None
    category: Optional[str] = None
    tags: Optional[List[str]] = None
    author: Optional[str] = None


class BlogPostCreate(BlogPostBase):
    title: str = Field(..., min_length=1)
    slug: str = Field(..., min_length=1)
    published: bool = False
    featured: bool = False


class BlogPostUpdate(BlogPostBase):
    title: Optional[str] = Field(None, min_length=1)
    slug: Optional[str] = Field(None, min_length=1)
    published: Optional[bool] = None
    featured: Optional[bool] = None


class BlogPost(BlogPostBase):
    id: str
    title: str
    slug: str
    published: bool
    featured: bool
    published_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int


class BlogPostPage(CamelModel):
    posts: List[BlogPost]
    pagination: Pagination


class BlogCommentCreate(CamelModel):
    """Public comment form. The post comes from the URL."""

    author_name: str = Field(..., min_length=1)
    author_email: Optional[str] = None
    author_url: Optional[str] = None
    content: str = Field(..., min_length=1)
    parent_id: Optional[str] = None


class BlogCommentModeration(CamelModel):
    status: Optional[CommentStatus] = None
    content: Optional[str] = Field(None, min_length=1)


class BlogCommentPublic(CamelModel):
    id: str
    post_id: str
    parent_id: Optional[str] = None
    author_name: str
    author_url: Optional[str] = None
    content: str
    created_at: datetime


class BlogComment(BlogCommentPublic):
    author_email: Optional[str] = None
    status: CommentStatus
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    updated_at: datetime
