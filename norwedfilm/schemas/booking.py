from datetime import date as date_type
from datetime import datetime
from typing import Optional

from pydantic import Field

from norwedfilm.constants.statuses import BookingStatus
from norwedfilm.schemas.base import CamelModel


class BookingBase(CamelModel):
    client_phone: Optional[str] = None
    event_type: Optional[str] = None
    location: Optional[str] = None
    notes: Optional[str] = None


class BookingCreate(BookingBase):
    date: date_type
    client_name: str = Field(..., min_length=1)
    client_email: str = Field(..., min_length=1)


class BookingUpdate(BookingBase):
    date: Optional[date_type] = None
    client_name: Optional[str] = Field(None, min_length=1)
    client_email: Optional[str] = Field(None, min_length=1)
    status: Optional[BookingStatus] = None


class Booking(BookingBase):
    id: str
    date: date_type
    client_name: str
    client_email: str
    status: BookingStatus
    created_at: datetime


class BlockedDateCreate(CamelModel):
    date: date_type
    reason: Optional[str] = None


class BlockedDateUpdate(CamelModel):
    date: Optional[date_type] = None
    reason: Optional[str] = None


class BlockedDate(BlockedDateCreate):
    id: str
    created_at: datetime
