# norwedfilm/api/endpoints/public.py
"""
Anonymous endpoints backing the marketing site.

Reads only ever return published/active content and are served through the
query cache. The two public writes (contact form, newsletter sign-up) are
rate limited.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from norwedfilm.api import deps
from norwedfilm.constants.statuses import ProjectCategory
from norwedfilm.core.exceptions import NotFoundError
from norwedfilm.core.limiter import limiter
from norwedfilm.crud import (
    crud_contact,
    crud_hero_slide,
    crud_media,
    crud_page,
    crud_project,
    crud_review,
    crud_subscriber,
)
from norwedfilm.db.session import get_db
from norwedfilm.schemas.base import to_json
from norwedfilm.schemas.contact import Contact, ContactCreate
from norwedfilm.schemas.hero_slide import HeroSlide
from norwedfilm.schemas.media import Media
from norwedfilm.schemas.page import Page
from norwedfilm.schemas.project import Project
from norwedfilm.schemas.review import Review
from norwedfilm.schemas.subscriber import Subscriber, SubscriberCreate
from norwedfilm.services.query_cache import QueryCache, resources_for

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Public"])


def _published_project_or_404(db: Session, slug: str):
    project = crud_project.project.get_published_by_slug(db, slug=slug)
    if project is None:
        raise NotFoundError("Project", slug)
    return project


@router.get("/projects", response_model=List[Project])
def list_projects(
    category: Optional[ProjectCategory] = None,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
):
    """
    Published projects, ordered by sortOrder then newest first.
    Optionally limited to one category.
    """
    category_value = category.value if category else None
    return cache.remember(
        cache.key("projects", category_value or "all"),
        lambda: to_json(
            Project, crud_project.project.get_published(db, category=category_value)
        ),
    )


@router.get("/projects/{slug}", response_model=Project)
def get_project(
    slug: str,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
):
    key = cache.key("project", slug)
    cached = cache.get(key)
    if cached is not None:
        return cached
    data = to_json(Project, _published_project_or_404(db, slug))
    cache.set(key, data)
    return data


@router.get("/projects/{slug}/media", response_model=List[Media])
def get_project_media(
    slug: str,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
):
    """Media of a published project in display order."""
    key = cache.key("project-media", slug)
    cached = cache.get(key)
    if cached is not None:
        return cached
    project = _published_project_or_404(db, slug)
    data = to_json(Media, crud_media.media.get_by_project(db, project_id=project.id))
    cache.set(key, data)
    return data


@router.get("/reviews", response_model=List[Review])
def list_reviews(
    featured: bool = False,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
):
    """
    Published reviews, newest first. With `featured=true` only featured
    reviews are returned, at most three.
    """
    return cache.remember(
        cache.key("reviews", "featured" if featured else "all"),
        lambda: to_json(Review, crud_review.review.get_published(db, featured=featured)),
    )


@router.get("/hero-slides", response_model=List[HeroSlide])
def list_hero_slides(
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
):
    return cache.remember(
        cache.key("hero-slides", "active"),
        lambda: to_json(HeroSlide, crud_hero_slide.hero_slide.get_active(db)),
    )


@router.get("/pages/{slug}", response_model=Page)
def get_page(
    slug: str,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
):
    key = cache.key("pages", slug)
    cached = cache.get(key)
    if cached is not None:
        return cached
    page = crud_page.page.get_published_by_slug(db, slug=slug)
    if page is None:
        raise NotFoundError("Page", slug)
    data = to_json(Page, page)
    cache.set(key, data)
    return data


@router.post("/contacts", response_model=Contact, status_code=status.HTTP_201_CREATED)
@limiter.limit("10/minute")
def submit_contact(
    request: Request,
    contact_in: ContactCreate,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
):
    """Contact form submission. New enquiries always start as "new"."""
    contact = crud_contact.contact.create(db, obj_in=contact_in)
    cache.invalidate(*resources_for("contacts"))
    logger.info(f"Contact enquiry {contact.id} received")
    return contact


@router.post(
    "/subscribers", response_model=Subscriber, status_code=status.HTTP_201_CREATED
)
@limiter.limit("10/minute")
def subscribe(
    request: Request,
    subscriber_in: SubscriberCreate,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
):
    """Newsletter sign-up. An address can only subscribe once (409 otherwise)."""
    subscriber = crud_subscriber.subscriber.create(db, obj_in=subscriber_in)
    cache.invalidate(*resources_for("subscribers"))
    return subscriber
