from datetime import datetime
from typing import Optional

from pydantic import Field

from norwedfilm.constants.statuses import ContactStatus
from norwedfilm.schemas.base import CamelModel


class ContactCreate(CamelModel):
    name: str = Field(..., min_length=1, json_schema_extra={"example": "Ingrid Hansen"})
    email: str = Field(..., min_length=1, json_schema_extra={"example": "ingrid@example.no"})
    phone: Optional[str] = None
    event_date: Optional[str] = None
    event_type: Optional[str] = None
    message: str = Field(..., min_length=1)


class ContactStatusUpdate(CamelModel):
    status: ContactStatus


class Contact(ContactCreate):
    id: str
    status: ContactStatus
    created_at: datetime
