from typing import List

from sqlalchemy.orm import Session

from .base import CRUDBase
from norwedfilm.models.hero_slide import HeroSlide
from norwedfilm.schemas.hero_slide import HeroSlideCreate, HeroSlideUpdate


class CRUDHeroSlide(CRUDBase[HeroSlide, HeroSlideCreate, HeroSlideUpdate]):
    resource_name = "Hero slide"

    def get_multi(
        self, db: Session, *, skip: int = 0, limit: int | None = None
    ) -> List[HeroSlide]:
        return db.query(self.model).order_by(self.model.sort_order.asc()).all()

    def get_active(self, db: Session) -> List[HeroSlide]:
        return (
            db.query(self.model)
            .filter(self.model.active == True)
            .order_by(self.model.sort_order.asc())
            .all()
        )


hero_slide = CRUDHeroSlide(HeroSlide)
