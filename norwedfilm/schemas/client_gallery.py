from datetime import datetime
from typing import List, Optional

from pydantic import Field

from norwedfilm.schemas.base import CamelModel
from norwedfilm.schemas.media import Media


class ClientGalleryBase(CamelModel):
    project_id: Optional[str] = None
    client_name: Optional[str] = None
    client_email: Optional[str] = None
    expires_at: Optional[datetime] = None


class ClientGalleryCreate(ClientGalleryBase):
    title: str = Field(..., min_length=1)
    slug: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    download_enabled: bool = True


class ClientGalleryUpdate(ClientGalleryBase):
    title: Optional[str] = Field(None, min_length=1)
    slug: Optional[str] = Field(None, min_length=1)
    password: Optional[str] = Field(None, min_length=1)
    download_enabled: Optional[bool] = None


class ClientGalleryPublic(ClientGalleryBase):
    """A gallery as shown to visitors: never includes the password."""

    id: str
    title: str
    slug: str
    download_enabled: bool
    view_count: int
    created_at: datetime


class ClientGallery(ClientGalleryPublic):
    password: str


class GalleryAccessRequest(CamelModel):
    password: str = Field(..., min_length=1)


class GalleryAccessResponse(CamelModel):
    gallery: ClientGalleryPublic
    media: List[Media]
