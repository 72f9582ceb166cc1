# tests/crud/test_crud_enquiries.py

from datetime import date

import pytest
from sqlalchemy.orm import Session

from norwedfilm.core.exceptions import ConflictError, ValidationError
from norwedfilm.crud import crud_booking, crud_contact, crud_subscriber
from norwedfilm.schemas.booking import BookingCreate, BookingUpdate
from norwedfilm.schemas.contact import ContactCreate
from norwedfilm.schemas.subscriber import SubscriberCreate, SubscriberUpdate


def _booking(db: Session, day: date):
    return crud_booking.booking.create(
        db,
        obj_in=BookingCreate(date=day, client_name="Kari", client_email="kari@example.no"),
    )


def test_new_contact_starts_as_new(db_session: Session):
    contact = crud_contact.contact.create(
        db_session,
        obj_in=ContactCreate(name="Ingrid", email="ingrid@example.no", message="Hei!"),
    )
    assert contact.status == "new"


def test_subscriber_email_is_unique(db_session: Session):
    crud_subscriber.subscriber.create(db_session, obj_in=SubscriberCreate(email="kari@example.no"))

    with pytest.raises(ConflictError):
        crud_subscriber.subscriber.create(
            db_session, obj_in=SubscriberCreate(email="kari@example.no", name="Kari")
        )


def test_subscriber_update_routes_status_through_lifecycle(db_session: Session):
    subscriber = crud_subscriber.subscriber.create(
        db_session, obj_in=SubscriberCreate(email="ola@example.no")
    )
    assert subscriber.status == "active"

    subscriber = crud_subscriber.subscriber.update(
        db_session,
        db_obj=subscriber,
        obj_in=SubscriberUpdate(name="Ola", status="unsubscribed"),
    )

    assert subscriber.name == "Ola"
    assert subscriber.status == "unsubscribed"


def test_bookings_in_date_order_and_filtered(db_session: Session):
    late = _booking(db_session, date(2026, 9, 12))
    early = _booking(db_session, date(2026, 6, 20))
    crud_booking.booking.update(
        db_session, db_obj=late, obj_in=BookingUpdate(status="confirmed")
    )

    assert [b.id for b in crud_booking.booking.get_multi_by_status(db_session)] == [
        early.id,
        late.id,
    ]
    confirmed = crud_booking.booking.get_multi_by_status(db_session, status="confirmed")
    assert [b.id for b in confirmed] == [late.id]


def test_booking_status_must_be_known(db_session: Session):
    booking = _booking(db_session, date(2026, 6, 20))

    with pytest.raises(ValidationError):
        crud_booking.booking.set_status(db_session, db_obj=booking, status="maybe")
