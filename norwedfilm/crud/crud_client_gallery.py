# norwedfilm/crud/crud_client_gallery.py
import secrets
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.orm import Session

from .base import CRUDBase
from .crud_media import _ensure_project_exists
from norwedfilm.core.exceptions import AuthError, GalleryExpiredError, NotFoundError
from norwedfilm.models.client_gallery import ClientGallery
from norwedfilm.schemas.client_gallery import ClientGalleryCreate, ClientGalleryUpdate


class CRUDClientGallery(CRUDBase[ClientGallery, ClientGalleryCreate, ClientGalleryUpdate]):
    resource_name = "Gallery"

    def get_by_slug(self, db: Session, *, slug: str) -> Optional[ClientGallery]:
        return db.query(self.model).filter(self.model.slug == slug).first()

    def create(self, db: Session, *, obj_in: ClientGalleryCreate) -> ClientGallery:
        _ensure_project_exists(db, obj_in.project_id)
        return super().create(db, obj_in=obj_in)

    def update(
        self, db: Session, *, db_obj: ClientGallery, obj_in: ClientGalleryUpdate
    ) -> ClientGallery:
        if "project_id" in obj_in.model_fields_set:
            _ensure_project_exists(db, obj_in.project_id)
        return super().update(db, db_obj=db_obj, obj_in=obj_in)

    def grant_access(
        self,
        db: Session,
        *,
        slug: str,
        password: str,
        now: datetime | None = None,
    ) -> ClientGallery:
        """
        Checks the visitor's password and the expiry date, then counts
        the view. Raises NotFoundError, AuthError or GalleryExpiredError.
        """
        gallery = self.get_by_slug(db, slug=slug)
        if gallery is None:
            raise NotFoundError(self.resource_name, slug)

        if not secrets.compare_digest(
            gallery.password.encode("utf-8"), password.encode("utf-8")
        ):
            raise AuthError("Invalid password")

        if is_expired(gallery, now=now):
            raise GalleryExpiredError()

        self.increment_view_count(db, gallery_id=gallery.id)
        db.refresh(gallery)
        return gallery

    def increment_view_count(self, db: Session, *, gallery_id: str) -> None:
        # Single UPDATE so concurrent visits are never lost.
        db.query(self.model).filter(self.model.id == gallery_id).update(
            {self.model.view_count: self.model.view_count + 1},
            synchronize_session=False,
        )
        db.commit()


def is_expired(gallery: ClientGallery, now: datetime | None = None) -> bool:
    if gallery.expires_at is None:
        return False
    now = now or datetime.now(timezone.utc)
    expires_at = gallery.expires_at
    # Some backends hand timestamps back without tzinfo; they are stored as UTC.
    if expires_at.tzinfo is None:
        expires_at = expires_at.replace(tzinfo=timezone.utc)
    return expires_at < now


client_gallery = CRUDClientGallery(ClientGallery)
