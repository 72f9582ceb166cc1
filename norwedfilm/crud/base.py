# norwedfilm/crud/base.py
import logging
from enum import Enum
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from norwedfilm.constants.statuses import can_transition
from norwedfilm.core.exceptions import (
    ConflictError,
    NotFoundError,
    StatusTransitionError,
    ValidationError,
)
from norwedfilm.db.base_class import Base

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    # Human readable name used in NotFound / Conflict messages.
    resource_name: str = "Resource"
    # Closed status set for entities with a lifecycle; None for the rest.
    status_enum: Optional[Type[Enum]] = None

    def __init__(self, model: Type[ModelType]):
        """
        CRUD object with default methods to Create, Read, Update, Delete (CRUD).

        **Parameters**

        * `model`: A SQLAlchemy model class
        """
        self.model = model

    def get(self, db: Session, id: Any) -> Optional[ModelType]:
        return db.query(self.model).filter(self.model.id == id).first()

    def get_or_raise(self, db: Session, id: Any) -> ModelType:
        db_obj = self.get(db, id=id)
        if db_obj is None:
            raise NotFoundError(self.resource_name, id)
        return db_obj

    def get_multi(
        self, db: Session, *, skip: int = 0, limit: int | None = None
    ) -> List[ModelType]:
        query = db.query(self.model).order_by(self.model.created_at.desc())
        if skip:
            query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def count(self, db: Session) -> int:
        return db.query(self.model).count()

    def create(
        self, db: Session, *, obj_in: Union[CreateSchemaType, Dict[str, Any]]
    ) -> ModelType:
        obj_in_data = obj_in if isinstance(obj_in, dict) else obj_in.model_dump()
        db_obj = self.model(**obj_in_data)
        db.add(db_obj)
        self._commit(db)
        db.refresh(db_obj)
        return db_obj

    def update(
        self,
        db: Session,
        *,
        db_obj: ModelType,
        obj_in: Union[UpdateSchemaType, Dict[str, Any]],
    ) -> ModelType:
        if isinstance(obj_in, dict):
            update_data = obj_in
        else:
            # Only fields the client actually sent; absent fields stay untouched.
            update_data = obj_in.model_dump(exclude_unset=True)
        self._reject_empty_required(update_data)
        for field, value in update_data.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)
        db.add(db_obj)
        self._commit(db)
        db.refresh(db_obj)
        return db_obj

    def _reject_empty_required(self, data: Dict[str, Any]) -> None:
        # An explicit null on a NOT NULL column is a bad request, not a conflict.
        columns = self.model.__table__.columns
        for field, value in data.items():
            column = columns.get(field)
            if value is None and column is not None and not column.nullable:
                raise ValidationError(f"{field} cannot be empty", field=to_camel(field))

    def remove(self, db: Session, *, id: Any) -> ModelType:
        obj = self.get_or_raise(db, id=id)
        db.delete(obj)
        db.commit()
        return obj

    def set_status(self, db: Session, *, db_obj: ModelType, status: str) -> ModelType:
        if self.status_enum is None:
            raise ValidationError(f"{self.resource_name} has no status", field="status")
        allowed = [member.value for member in self.status_enum]
        if status not in allowed:
            raise ValidationError(
                f"status must be one of: {', '.join(allowed)}", field="status"
            )
        if not can_transition(self.status_enum, db_obj.status, status):
            raise StatusTransitionError(self.resource_name, db_obj.status, status)
        db_obj.status = status
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def _commit(self, db: Session) -> None:
        """
        Commits the pending unit of work. A unique or foreign key violation
        rolls the whole transaction back and surfaces as a ConflictError.
        """
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            logger.warning(
                f"Integrity error writing {self.resource_name}: {e.orig}"
            )
            raise ConflictError(
                f"{self.resource_name} conflicts with an existing record",
                details={"resource": self.resource_name},
            )
