import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from norwedfilm.crud import crud_client_gallery, crud_media, crud_project
from norwedfilm.models.client_gallery import ClientGallery
from norwedfilm.models.media import Media
from norwedfilm.models.project import Project
from norwedfilm.schemas.client_gallery import ClientGalleryCreate
from norwedfilm.schemas.media import MediaCreate
from norwedfilm.schemas.project import ProjectCreate


def create_random_project(
    db: Session,
    *,
    category: str = "wedding-photo",
    published: bool = True,
    sort_order: int = 0,
    slug: Optional[str] = None,
) -> Project:
    """
    Creates a dummy portfolio project for testing purposes.
    """
    project_in = ProjectCreate(
        title="Emma & Lars",
        slug=slug or f"emma-lars-{uuid.uuid4().hex[:6]}",
        category=category,
        published=published,
        sort_order=sort_order,
        location="Oslo, Norway",
    )
    return crud_project.project.create(db, obj_in=project_in)


def create_random_media(db: Session, project_id: str, sort_order: int = 0) -> Media:
    media_in = MediaCreate(
        project_id=project_id,
        type="image",
        url=f"https://cdn.example.com/{uuid.uuid4().hex}.jpg",
        sort_order=sort_order,
    )
    return crud_media.media.create(db, obj_in=media_in)


def create_random_gallery(
    db: Session,
    project_id: Optional[str] = None,
    *,
    password: str = "forever",
    expires_at: Optional[datetime] = None,
) -> ClientGallery:
    gallery_in = ClientGalleryCreate(
        project_id=project_id,
        title="Emma & Lars - Wedding",
        slug=f"gallery-{uuid.uuid4().hex[:6]}",
        password=password,
        client_name="Emma Andersen",
        expires_at=expires_at,
    )
    return crud_client_gallery.client_gallery.create(db, obj_in=gallery_in)
