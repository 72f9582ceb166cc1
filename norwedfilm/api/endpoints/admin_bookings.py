# norwedfilm/api/endpoints/admin_bookings.py
"""
Booking calendar: client bookings and dates blocked by the studio.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from norwedfilm.api import deps
from norwedfilm.constants.statuses import BookingStatus
from norwedfilm.crud import crud_booking
from norwedfilm.db.session import get_db
from norwedfilm.schemas.booking import (
    BlockedDate,
    BlockedDateCreate,
    BlockedDateUpdate,
    Booking,
    BookingCreate,
    BookingUpdate,
)
from norwedfilm.services.query_cache import QueryCache, resources_for

router = APIRouter(prefix="/admin/bookings", tags=["Admin: Bookings"])
blocked_dates_router = APIRouter(
    prefix="/admin/blocked-dates", tags=["Admin: Bookings"]
)


@router.get("", response_model=List[Booking])
def list_bookings(
    status: Optional[BookingStatus] = None,
    db: Session = Depends(get_db),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    """Bookings in date order, optionally only those with the given status."""
    return crud_booking.booking.get_multi_by_status(
        db, status=status.value if status else None
    )


@router.post("", response_model=Booking, status_code=status.HTTP_201_CREATED)
def create_booking(
    booking_in: BookingCreate,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    booking = crud_booking.booking.create(db, obj_in=booking_in)
    cache.invalidate(*resources_for("bookings"))
    return booking


@router.patch("/{booking_id}", response_model=Booking)
def update_booking(
    booking_id: str,
    booking_in: BookingUpdate,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    booking = crud_booking.booking.get_or_raise(db, id=booking_id)
    booking = crud_booking.booking.update(db, db_obj=booking, obj_in=booking_in)
    cache.invalidate(*resources_for("bookings"))
    return booking


@router.delete("/{booking_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_booking(
    booking_id: str,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    crud_booking.booking.remove(db, id=booking_id)
    cache.invalidate(*resources_for("bookings"))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@blocked_dates_router.get("", response_model=List[BlockedDate])
def list_blocked_dates(
    db: Session = Depends(get_db),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    return crud_booking.blocked_date.get_multi(db)


@blocked_dates_router.post(
    "", response_model=BlockedDate, status_code=status.HTTP_201_CREATED
)
def create_blocked_date(
    blocked_in: BlockedDateCreate,
    db: Session = Depends(get_db),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    return crud_booking.blocked_date.create(db, obj_in=blocked_in)


@blocked_dates_router.patch("/{blocked_date_id}", response_model=BlockedDate)
def update_blocked_date(
    blocked_date_id: str,
    blocked_in: BlockedDateUpdate,
    db: Session = Depends(get_db),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    blocked = crud_booking.blocked_date.get_or_raise(db, id=blocked_date_id)
    return crud_booking.blocked_date.update(db, db_obj=blocked, obj_in=blocked_in)


@blocked_dates_router.delete(
    "/{blocked_date_id}", status_code=status.HTTP_204_NO_CONTENT
)
def delete_blocked_date(
    blocked_date_id: str,
    db: Session = Depends(get_db),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    crud_booking.blocked_date.remove(db, id=blocked_date_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
