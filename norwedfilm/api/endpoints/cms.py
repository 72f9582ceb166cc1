# norwedfilm/api/endpoints/cms.py
"""
Landing page and navigation editor.

The public routes feed the marketing site and fall back to built-in content
when nothing has been configured. Everything else is for the admin editor.
"""
import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Response, status
from sqlalchemy.orm import Session

from norwedfilm.api import deps
from norwedfilm.constants.statuses import CommentStatus
from norwedfilm.crud import crud_blog_comment, crud_review
from norwedfilm.db.session import get_db
from norwedfilm.schemas.blog import BlogComment, BlogCommentModeration
from norwedfilm.schemas.cms import LandingTestimonial, NavigationIn
from norwedfilm.services import cms
from norwedfilm.services.query_cache import QueryCache, resources_for

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cms", tags=["CMS"])


def _user_name(principal: deps.AdminPrincipal) -> str:
    first_name = getattr(principal, "first_name", None)
    return first_name or principal.email or "Admin"


# --- Public ---


@router.get("/navigation/public")
def get_public_navigation(
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
):
    """Active header links in display order, or the default menu."""
    return cache.remember(
        cache.key("cms-navigation", "public"),
        lambda: cms.build_public_navigation_payload(db),
    )


@router.get("/landing/public")
def get_public_landing(
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
):
    return cache.remember(
        cache.key("cms-landing", "public"),
        lambda: cms.build_public_landing_payload(db),
    )


# --- Landing page editor ---


@router.get("/landing")
def get_landing(
    db: Session = Depends(get_db),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    return cms.build_landing_payload(db)


@router.post("/hero")
def save_hero(
    data: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    cms.save_hero(db, data=data)
    cache.invalidate(*resources_for("settings"), *resources_for("hero-slides"))
    return {"success": True}


@router.post("/sections")
def save_sections(
    data: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    cms.save_sections(db, data=data)
    cache.invalidate(*resources_for("settings"))
    return {"success": True}


@router.post("/features", status_code=status.HTTP_201_CREATED)
def create_feature(
    data: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    feature = cms.features.add(db, data=data)
    cache.invalidate(*resources_for("settings"))
    return feature


@router.put("/features/{feature_id}")
def update_feature(
    feature_id: str,
    data: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    feature = cms.features.replace(db, item_id=feature_id, data=data)
    cache.invalidate(*resources_for("settings"))
    return feature


@router.delete("/features/{feature_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_feature(
    feature_id: str,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    cms.features.remove(db, item_id=feature_id)
    cache.invalidate(*resources_for("settings"))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/partners", status_code=status.HTTP_201_CREATED)
def create_partner(
    data: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    partner = cms.partners.add(db, data=data)
    cache.invalidate(*resources_for("settings"))
    return partner


@router.put("/partners/{partner_id}")
def update_partner(
    partner_id: str,
    data: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    partner = cms.partners.replace(db, item_id=partner_id, data=data)
    cache.invalidate(*resources_for("settings"))
    return partner


@router.delete("/partners/{partner_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_partner(
    partner_id: str,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    cms.partners.remove(db, item_id=partner_id)
    cache.invalidate(*resources_for("settings"))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/testimonials", status_code=status.HTTP_201_CREATED)
def create_testimonial(
    testimonial_in: LandingTestimonial,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    review = crud_review.review.create(
        db, obj_in=cms.review_data_from_testimonial(testimonial_in.model_dump())
    )
    cache.invalidate(*resources_for("reviews"))
    return cms.testimonial_from_review(review)


@router.put("/testimonials/{review_id}")
def update_testimonial(
    review_id: str,
    testimonial_in: LandingTestimonial,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    review = crud_review.review.get_or_raise(db, id=review_id)
    data = cms.review_data_from_testimonial(testimonial_in.model_dump())
    # The rating of an existing review is not part of the testimonial form.
    data.pop("rating")
    review = crud_review.review.update(db, db_obj=review, obj_in=data)
    cache.invalidate(*resources_for("reviews"))
    return cms.testimonial_from_review(review)


@router.delete("/testimonials/{review_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_testimonial(
    review_id: str,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    crud_review.review.remove(db, id=review_id)
    cache.invalidate(*resources_for("reviews"))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/publish")
def publish_landing(
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    """
    Snapshots the current landing page as a new version and marks it
    published.
    """
    version = cms.publish_landing(db, user_name=_user_name(current_admin))
    cache.invalidate(*resources_for("settings"))
    return {
        "success": True,
        "version": version["version"],
        "publishedAt": version["created_at"],
    }


# --- Navigation ---


@router.get("/navigation/header")
def get_navigation(
    db: Session = Depends(get_db),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    return cms.build_navigation_payload(db)


@router.put("/navigation/header")
def save_navigation(
    navigation_in: NavigationIn,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    cms.save_navigation(
        db, items=navigation_in.items, user_name=_user_name(current_admin)
    )
    cache.invalidate(*resources_for("settings"))
    return {"success": True, "items": navigation_in.items}


@router.get("/activity-log")
def get_activity_log(
    db: Session = Depends(get_db),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
) -> List[Dict[str, Any]]:
    """Editor actions, newest first."""
    return cms.get_activity_log(db)


# --- Comment moderation ---


@router.get("/comments", response_model=List[BlogComment])
def list_comments(
    status: Optional[CommentStatus] = None,
    db: Session = Depends(get_db),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    return crud_blog_comment.blog_comment.get_for_moderation(
        db, status=status.value if status else None
    )


@router.put("/comments/{comment_id}", response_model=BlogComment)
def moderate_comment(
    comment_id: str,
    moderation_in: BlogCommentModeration,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    """Approve, reject or mark as spam, and optionally edit the text."""
    comment = crud_blog_comment.blog_comment.get_or_raise(db, id=comment_id)
    comment = crud_blog_comment.blog_comment.moderate(
        db, db_obj=comment, obj_in=moderation_in
    )
    cache.invalidate(*resources_for("comments"))
    logger.info(f"Comment {comment.id} moderated: {comment.status}")
    return comment


@router.delete("/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_comment(
    comment_id: str,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    crud_blog_comment.blog_comment.remove(db, id=comment_id)
    cache.invalidate(*resources_for("comments"))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
