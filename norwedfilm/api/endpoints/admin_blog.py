# norwedfilm/api/endpoints/admin_blog.py
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from norwedfilm.api import deps
from norwedfilm.crud import crud_blog_post
from norwedfilm.db.session import get_db
from norwedfilm.schemas.blog import BlogPost, BlogPostCreate, BlogPostUpdate
from norwedfilm.services.query_cache import QueryCache, resources_for

router = APIRouter(prefix="/admin/blog", tags=["Admin: Blog"])


@router.get("", response_model=List[BlogPost])
def list_posts(
    db: Session = Depends(get_db),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    """Drafts and published posts alike, newest first."""
    return crud_blog_post.blog_post.get_multi(db)


@router.post("", response_model=BlogPost, status_code=status.HTTP_201_CREATED)
def create_post(
    post_in: BlogPostCreate,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    post = crud_blog_post.blog_post.create(db, obj_in=post_in)
    cache.invalidate(*resources_for("blog"))
    return post


@router.patch("/{post_id}", response_model=BlogPost)
def update_post(
    post_id: str,
    post_in: BlogPostUpdate,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    """
    Partial update. Publishing a post for the first time stamps publishedAt;
    unpublishing keeps the original date.
    """
    post = crud_blog_post.blog_post.get_or_raise(db, id=post_id)
    post = crud_blog_post.blog_post.update(db, db_obj=post, obj_in=post_in)
    cache.invalidate(*resources_for("blog"))
    return post


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_post(
    post_id: str,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    crud_blog_post.blog_post.remove(db, id=post_id)
    cache.invalidate(*resources_for("blog"))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
