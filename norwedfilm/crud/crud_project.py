# norwedfilm/crud/crud_project.py
from typing import List, Optional

from sqlalchemy.orm import Session

from .base import CRUDBase
from norwedfilm.models.project import Project
from norwedfilm.schemas.project import ProjectCreate, ProjectUpdate


class CRUDProject(CRUDBase[Project, ProjectCreate, ProjectUpdate]):
    resource_name = "Project"

    def get_by_slug(self, db: Session, *, slug: str) -> Optional[Project]:
        return db.query(self.model).filter(self.model.slug == slug).first()

    def get_published(
        self, db: Session, *, category: str | None = None
    ) -> List[Project]:
        """
        Published projects for the public portfolio, optionally limited to
        one category. Ordered by sortOrder, newest first within equal
        sortOrder.
        """
        query = db.query(self.model).filter(self.model.published == True)
        if category:
            query = query.filter(self.model.category == category)
        return query.order_by(
            self.model.sort_order.asc(), self.model.created_at.desc()
        ).all()

    def get_published_by_slug(self, db: Session, *, slug: str) -> Optional[Project]:
        return (
            db.query(self.model)
            .filter(self.model.slug == slug, self.model.published == True)
            .first()
        )


project = CRUDProject(Project)
