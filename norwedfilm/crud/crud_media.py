# norwedfilm/crud/crud_media.py
from typing import List

from sqlalchemy.orm import Session

from .base import CRUDBase
from norwedfilm.core.exceptions import ValidationError
from norwedfilm.models.media import Media
from norwedfilm.models.project import Project
from norwedfilm.schemas.media import MediaCreate, MediaUpdate


class CRUDMedia(CRUDBase[Media, MediaCreate, MediaUpdate]):
    resource_name = "Media"

    def get_by_project(self, db: Session, *, project_id: str) -> List[Media]:
        return (
            db.query(self.model)
            .filter(self.model.project_id == project_id)
            .order_by(self.model.sort_order.asc())
            .all()
        )

    def create(self, db: Session, *, obj_in: MediaCreate) -> Media:
        _ensure_project_exists(db, obj_in.project_id)
        return super().create(db, obj_in=obj_in)

    def update(self, db: Session, *, db_obj: Media, obj_in: MediaUpdate) -> Media:
        if "project_id" in obj_in.model_fields_set:
            _ensure_project_exists(db, obj_in.project_id)
        return super().update(db, db_obj=db_obj, obj_in=obj_in)


def _ensure_project_exists(db: Session, project_id: str | None) -> None:
    # Not every backend enforces foreign keys, so check the reference here.
    if project_id is None:
        return
    if db.query(Project.id).filter(Project.id == project_id).first() is None:
        raise ValidationError(f"Unknown project '{project_id}'", field="projectId")


media = CRUDMedia(Media)
