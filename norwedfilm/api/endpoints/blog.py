# norwedfilm/api/endpoints/blog.py
import logging
import math
from typing import List, Optional

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session

from norwedfilm.api import deps
from norwedfilm.core.exceptions import NotFoundError
from norwedfilm.core.limiter import limiter
from norwedfilm.crud import crud_blog_comment, crud_blog_post
from norwedfilm.db.session import get_db
from norwedfilm.schemas.base import to_json
from norwedfilm.schemas.blog import (
    BlogCommentCreate,
    BlogCommentPublic,
    BlogPost,
    BlogPostPage,
)
from norwedfilm.services.feed import build_rss_feed
from norwedfilm.services.query_cache import QueryCache
from norwedfilm.utils.security import clamp_limit, clamp_page

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/blog", tags=["Blog"])

# Served from the site root rather than under /api.
feed_router = APIRouter(tags=["Blog"])

DEFAULT_PAGE_SIZE = 12
MAX_PAGE_SIZE = 50
DEFAULT_RELATED = 3
MAX_RELATED = 10


@router.get("", response_model=BlogPostPage)
def list_posts(
    page: Optional[int] = None,
    limit: Optional[int] = None,
    q: Optional[str] = None,
    category: Optional[str] = None,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
):
    """
    Published posts, newest first by publication date, with optional text
    search (`q`) and category filter.
    """
    page = clamp_page(page)
    limit = clamp_limit(limit, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE)
    q = (q or "").strip() or None
    category = (category or "").strip() or None

    def load():
        posts, total = crud_blog_post.blog_post.search_published(
            db, page=page, limit=limit, q=q, category=category
        )
        return {
            "posts": to_json(BlogPost, posts),
            "pagination": {
                "page": page,
                "limit": limit,
                "total": total,
                "totalPages": math.ceil(total / limit),
            },
        }

    return cache.remember(cache.key("blog", "list", page, limit, q, category), load)


@router.get("/{slug}", response_model=BlogPost)
def get_post(
    slug: str,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
):
    key = cache.key("blog", "post", slug)
    cached = cache.get(key)
    if cached is not None:
        return cached
    post = crud_blog_post.blog_post.get_published_by_slug(db, slug=slug)
    if post is None:
        raise NotFoundError("Blog post", slug)
    data = to_json(BlogPost, post)
    cache.set(key, data)
    return data


@router.get("/{slug}/related", response_model=List[BlogPost])
def get_related_posts(
    slug: str,
    limit: Optional[int] = None,
    db: Session = Depends(get_db),
):
    """Other published posts in the same category. Unknown slugs give []."""
    limit = clamp_limit(limit, DEFAULT_RELATED, MAX_RELATED)
    post = crud_blog_post.blog_post.get_by_slug(db, slug=slug)
    if post is None:
        return []
    return crud_blog_post.blog_post.get_related(db, post=post, limit=limit)


@router.get("/{slug}/comments", response_model=List[BlogCommentPublic])
def list_comments(
    slug: str,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
):
    """Approved comments, oldest first."""
    post = crud_blog_post.blog_post.get_by_slug(db, slug=slug)
    if post is None:
        return []
    return cache.remember(
        cache.key("blog-comments", post.id),
        lambda: to_json(
            BlogCommentPublic,
            crud_blog_comment.blog_comment.get_approved_for_post(db, post_id=post.id),
        ),
    )


@router.post(
    "/{slug}/comments",
    response_model=BlogCommentPublic,
    status_code=status.HTTP_201_CREATED,
)
@limiter.limit("5/minute")
def create_comment(
    request: Request,
    slug: str,
    comment_in: BlogCommentCreate,
    db: Session = Depends(get_db),
):
    """Submits a comment for moderation; it is hidden until approved."""
    post = crud_blog_post.blog_post.get_published_by_slug(db, slug=slug)
    if post is None:
        raise NotFoundError("Blog post", slug)
    comment = crud_blog_comment.blog_comment.create_for_post(
        db,
        obj_in=comment_in,
        post=post,
        ip_address=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent"),
    )
    logger.info(f"Comment {comment.id} awaiting moderation on post {post.id}")
    return comment


@feed_router.get("/feed.xml", response_class=Response)
def rss_feed(
    request: Request,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
):
    base_url = str(request.base_url).rstrip("/")
    xml = cache.remember(
        cache.key("feed", base_url),
        lambda: build_rss_feed(crud_blog_post.blog_post.get_published(db), base_url),
    )
    return Response(content=xml, media_type="application/rss+xml; charset=utf-8")
