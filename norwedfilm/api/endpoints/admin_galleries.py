# norwedfilm/api/endpoints/admin_galleries.py
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from norwedfilm.api import deps
from norwedfilm.crud import crud_client_gallery
from norwedfilm.db.session import get_db
from norwedfilm.schemas.client_gallery import (
    ClientGallery,
    ClientGalleryCreate,
    ClientGalleryUpdate,
)

router = APIRouter(prefix="/admin/galleries", tags=["Admin: Client galleries"])


@router.get("", response_model=List[ClientGallery])
def list_galleries(
    db: Session = Depends(get_db),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    """Client galleries including their access passwords."""
    return crud_client_gallery.client_gallery.get_multi(db)


@router.post("", response_model=ClientGallery, status_code=status.HTTP_201_CREATED)
def create_gallery(
    gallery_in: ClientGalleryCreate,
    db: Session = Depends(get_db),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    return crud_client_gallery.client_gallery.create(db, obj_in=gallery_in)


@router.patch("/{gallery_id}", response_model=ClientGallery)
def update_gallery(
    gallery_id: str,
    gallery_in: ClientGalleryUpdate,
    db: Session = Depends(get_db),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    gallery = crud_client_gallery.client_gallery.get_or_raise(db, id=gallery_id)
    return crud_client_gallery.client_gallery.update(
        db, db_obj=gallery, obj_in=gallery_in
    )


@router.delete("/{gallery_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_gallery(
    gallery_id: str,
    db: Session = Depends(get_db),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    crud_client_gallery.client_gallery.remove(db, id=gallery_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
