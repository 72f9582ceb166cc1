# norwedfilm/api/endpoints/admin_media.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from norwedfilm.api import deps
from norwedfilm.crud import crud_media
from norwedfilm.db.session import get_db
from norwedfilm.schemas.media import Media, MediaCreate, MediaUpdate
from norwedfilm.services.query_cache import QueryCache, resources_for

router = APIRouter(prefix="/admin/media", tags=["Admin: Media"])


@router.get("", response_model=List[Media])
def list_media(
    project_id: Optional[str] = Query(None, alias="projectId"),
    db: Session = Depends(get_db),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    """
    The media library, or one project's media in display order.
    """
    if project_id:
        return crud_media.media.get_by_project(db, project_id=project_id)
    return crud_media.media.get_multi(db)


@router.post("", response_model=Media, status_code=status.HTTP_201_CREATED)
def create_media(
    media_in: MediaCreate,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    media = crud_media.media.create(db, obj_in=media_in)
    cache.invalidate(*resources_for("media"))
    return media


@router.patch("/{media_id}", response_model=Media)
def update_media(
    media_id: str,
    media_in: MediaUpdate,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    media = crud_media.media.get_or_raise(db, id=media_id)
    media = crud_media.media.update(db, db_obj=media, obj_in=media_in)
    cache.invalidate(*resources_for("media"))
    return media


@router.delete("/{media_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_media(
    media_id: str,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    crud_media.media.remove(db, id=media_id)
    cache.invalidate(*resources_for("media"))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
