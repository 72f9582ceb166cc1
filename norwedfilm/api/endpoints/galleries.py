# norwedfilm/api/endpoints/galleries.py
import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from norwedfilm.core.exceptions import NotFoundError
from norwedfilm.core.limiter import limiter
from norwedfilm.crud import crud_client_gallery, crud_media
from norwedfilm.db.session import get_db
from norwedfilm.schemas.client_gallery import (
    ClientGalleryPublic,
    GalleryAccessRequest,
    GalleryAccessResponse,
)
from norwedfilm.schemas.media import Media

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/galleries", tags=["Client galleries"])


@router.get("/{slug}", response_model=ClientGalleryPublic)
def get_gallery(slug: str, db: Session = Depends(get_db)):
    """Gallery details for the password prompt. The password is never returned."""
    gallery = crud_client_gallery.client_gallery.get_by_slug(db, slug=slug)
    if gallery is None:
        raise NotFoundError("Gallery", slug)
    return gallery


@router.post("/{slug}/access", response_model=GalleryAccessResponse)
@limiter.limit("10/minute")
def access_gallery(
    request: Request,
    slug: str,
    access_in: GalleryAccessRequest,
    db: Session = Depends(get_db),
):
    """
    Unlocks a client gallery. A wrong password gives 401 and an expired
    gallery 410; every successful unlock counts as one view.
    """
    gallery = crud_client_gallery.client_gallery.grant_access(
        db, slug=slug, password=access_in.password
    )
    media = []
    if gallery.project_id:
        media = crud_media.media.get_by_project(db, project_id=gallery.project_id)
    logger.info(f"Gallery {gallery.id} opened ({gallery.view_count} views)")
    return GalleryAccessResponse(
        gallery=ClientGalleryPublic.model_validate(gallery),
        media=[Media.model_validate(item) for item in media],
    )
