from typing import List, Optional

from sqlalchemy.orm import Session

from .base import CRUDBase
from norwedfilm.models.page import Page
from norwedfilm.schemas.page import PageCreate, PageUpdate


class CRUDPage(CRUDBase[Page, PageCreate, PageUpdate]):
    resource_name = "Page"

    def get_multi(self, db: Session, *, skip: int = 0, limit: int | None = None) -> List[Page]:
        # Admin list is alphabetical.
        return db.query(self.model).order_by(self.model.title.asc()).all()

    def get_published_by_slug(self, db: Session, *, slug: str) -> Optional[Page]:
        return (
            db.query(self.model)
            .filter(self.model.slug == slug, self.model.published == True)
            .first()
        )


page = CRUDPage(Page)
