# norwedfilm/crud/crud_review.py
from typing import List

from sqlalchemy.orm import Session

from .base import CRUDBase
from norwedfilm.models.review import Review
from norwedfilm.schemas.review import ReviewCreate, ReviewUpdate

# The home page shows at most this many featured reviews.
FEATURED_REVIEW_LIMIT = 3


class CRUDReview(CRUDBase[Review, ReviewCreate, ReviewUpdate]):
    resource_name = "Review"

    def get_published(self, db: Session, *, featured: bool = False) -> List[Review]:
        query = db.query(self.model).filter(self.model.published == True)
        if featured:
            query = query.filter(self.model.featured == True)
        query = query.order_by(self.model.created_at.desc())
        if featured:
            query = query.limit(FEATURED_REVIEW_LIMIT)
        return query.all()


review = CRUDReview(Review)
