# norwedfilm/crud/crud_blog_comment.py
from typing import List

from sqlalchemy.orm import Session

from .base import CRUDBase
from norwedfilm.constants.statuses import CommentStatus
from norwedfilm.core.exceptions import ValidationError
from norwedfilm.models.blog_comment import BlogComment
from norwedfilm.models.blog_post import BlogPost
from norwedfilm.schemas.blog import BlogCommentCreate, BlogCommentModeration


class CRUDBlogComment(CRUDBase[BlogComment, BlogCommentCreate, BlogCommentModeration]):
    resource_name = "Comment"
    status_enum = CommentStatus

    def create_for_post(
        self,
        db: Session,
        *,
        obj_in: BlogCommentCreate,
        post: BlogPost,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> BlogComment:
        """New visitor comments always wait for moderation."""
        if obj_in.parent_id is not None:
            parent = self.get(db, id=obj_in.parent_id)
            if parent is None or parent.post_id != post.id:
                raise ValidationError("Unknown parent comment", field="parentId")

        return self.create(
            db,
            obj_in={
                **obj_in.model_dump(),
                "post_id": post.id,
                "status": CommentStatus.pending.value,
                "ip_address": ip_address,
                "user_agent": user_agent,
            },
        )

    def get_approved_for_post(self, db: Session, *, post_id: str) -> List[BlogComment]:
        return (
            db.query(self.model)
            .filter(
                self.model.post_id == post_id,
                self.model.status == CommentStatus.approved.value,
            )
            .order_by(self.model.created_at.asc())
            .all()
        )

    def get_for_moderation(self, db: Session, *, status: str | None = None) -> List[BlogComment]:
        query = db.query(self.model)
        if status:
            query = query.filter(self.model.status == status)
        return query.order_by(self.model.created_at.desc()).all()

    def moderate(
        self, db: Session, *, db_obj: BlogComment, obj_in: BlogCommentModeration
    ) -> BlogComment:
        if obj_in.content is not None:
            db_obj.content = obj_in.content
        if obj_in.status is not None:
            return self.set_status(db, db_obj=db_obj, status=obj_in.status)
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj


blog_comment = CRUDBlogComment(BlogComment)
