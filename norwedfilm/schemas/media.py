from datetime import datetime
from typing import Optional

from pydantic import Field

from norwedfilm.constants.statuses import MediaType
from norwedfilm.schemas.base import CamelModel


class MediaBase(CamelModel):
    project_id: Optional[str] = None
    thumbnail_url: Optional[str] = None
    title: Optional[str] = None
    alt: Optional[str] = None


class MediaCreate(MediaBase):
    type: MediaType
    url: str = Field(..., min_length=1)
    sort_order: int = 0


class MediaUpdate(MediaBase):
    type: Optional[MediaType] = None
    url: Optional[str] = Field(None, min_length=1)
    sort_order: Optional[int] = None


class Media(MediaBase):
    id: str
    type: MediaType
    url: str
    sort_order: int
    created_at: datetime
