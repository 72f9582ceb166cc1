# norwedfilm/crud/crud_blog_post.py
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from .base import CRUDBase
from norwedfilm.models.blog_post import BlogPost
from norwedfilm.schemas.blog import BlogPostCreate, BlogPostUpdate


class CRUDBlogPost(CRUDBase[BlogPost, BlogPostCreate, BlogPostUpdate]):
    resource_name = "Blog post"

    def create(self, db: Session, *, obj_in: BlogPostCreate) -> BlogPost:
        obj_in_data = obj_in.model_dump()
        if obj_in_data.get("published"):
            obj_in_data["published_at"] = datetime.now(timezone.utc)
        return super().create(db, obj_in=obj_in_data)

    def update(
        self, db: Session, *, db_obj: BlogPost, obj_in: BlogPostUpdate
    ) -> BlogPost:
        update_data = obj_in.model_dump(exclude_unset=True)
        # publishedAt records the first publication and is never cleared.
        if update_data.get("published") and db_obj.published_at is None:
            update_data["published_at"] = datetime.now(timezone.utc)
        return super().update(db, db_obj=db_obj, obj_in=update_data)

    def get_by_slug(self, db: Session, *, slug: str) -> Optional[BlogPost]:
        return db.query(self.model).filter(self.model.slug == slug).first()

    def get_published_by_slug(self, db: Session, *, slug: str) -> Optional[BlogPost]:
        post = self.get_by_slug(db, slug=slug)
        if post is None or not post.published:
            return None
        return post

    def _newest_first(self):
        return func.coalesce(self.model.published_at, self.model.created_at).desc()

    def search_published(
        self,
        db: Session,
        *,
        page: int = 1,
        limit: int = 12,
        q: str | None = None,
        category: str | None = None,
    ) -> Tuple[List[BlogPost], int]:
        """
        One page of published posts plus the total number of matches.
        ``q`` is matched case-insensitively against title, excerpt and content.
        """
        query = db.query(self.model).filter(self.model.published == True)
        if q:
            pattern = f"%{q}%"
            query = query.filter(
                or_(
                    self.model.title.ilike(pattern),
                    self.model.excerpt.ilike(pattern),
                    self.model.content.ilike(pattern),
                )
            )
        if category:
            query = query.filter(self.model.category == category)

        total = query.count()
        posts = (
            query.order_by(self._newest_first())
            .offset((page - 1) * limit)
            .limit(limit)
            .all()
        )
        return posts, total

    def get_published(self, db: Session) -> List[BlogPost]:
        return (
            db.query(self.model)
            .filter(self.model.published == True)
            .order_by(self._newest_first())
            .all()
        )

    def get_related(self, db: Session, *, post: BlogPost, limit: int = 3) -> List[BlogPost]:
        query = db.query(self.model).filter(
            self.model.published == True, self.model.id != post.id
        )
        # Uncategorised posts relate to everything.
        if post.category is not None:
            query = query.filter(self.model.category == post.category)
        return query.order_by(self._newest_first()).limit(limit).all()


blog_post = CRUDBlogPost(BlogPost)
