# norwedfilm/crud/crud_booking.py
from typing import List

from sqlalchemy.orm import Session

from .base import CRUDBase
from norwedfilm.constants.statuses import BookingStatus
from norwedfilm.models.blocked_date import BlockedDate
from norwedfilm.models.booking import Booking
from norwedfilm.schemas.booking import (
    BlockedDateCreate,
    BlockedDateUpdate,
    BookingCreate,
    BookingUpdate,
)


class CRUDBooking(CRUDBase[Booking, BookingCreate, BookingUpdate]):
    resource_name = "Booking"
    status_enum = BookingStatus

    def get_multi_by_status(self, db: Session, *, status: str | None = None) -> List[Booking]:
        """Bookings in calendar order, optionally filtered by status."""
        query = db.query(self.model)
        if status:
            query = query.filter(self.model.status == status)
        return query.order_by(self.model.date.asc(), self.model.created_at.asc()).all()

    def update(self, db: Session, *, db_obj: Booking, obj_in: BookingUpdate) -> Booking:
        update_data = obj_in.model_dump(exclude_unset=True)
        status = update_data.pop("status", None)
        if update_data:
            db_obj = super().update(db, db_obj=db_obj, obj_in=update_data)
        if status is not None:
            db_obj = self.set_status(db, db_obj=db_obj, status=status)
        return db_obj


class CRUDBlockedDate(CRUDBase[BlockedDate, BlockedDateCreate, BlockedDateUpdate]):
    # Overlapping or duplicate dates are accepted as entered.
    resource_name = "Blocked date"

    def get_multi(
        self, db: Session, *, skip: int = 0, limit: int | None = None
    ) -> List[BlockedDate]:
        return db.query(self.model).order_by(self.model.date.asc()).all()


booking = CRUDBooking(Booking)
blocked_date = CRUDBlockedDate(BlockedDate)
