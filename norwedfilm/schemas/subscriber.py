from datetime import datetime
from typing import Optional

from pydantic import Field

from norwedfilm.constants.statuses import SubscriberStatus
from norwedfilm.schemas.base import CamelModel


class SubscriberCreate(CamelModel):
    email: str = Field(..., min_length=1, json_schema_extra={"example": "kari@example.no"})
    name: Optional[str] = None
    source: Optional[str] = Field(None, json_schema_extra={"example": "footer"})


class SubscriberUpdate(CamelModel):
    email: Optional[str] = Field(None, min_length=1)
    name: Optional[str] = None
    source: Optional[str] = None
    status: Optional[SubscriberStatus] = None


class Subscriber(SubscriberCreate):
    id: str
    status: SubscriberStatus
    created_at: datetime
