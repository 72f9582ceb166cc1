from datetime import datetime
from typing import Optional

from pydantic import Field

from norwedfilm.schemas.base import CamelModel


class PageBase(CamelModel):
    content: Optional[str] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None


class PageCreate(PageBase):
    slug: str = Field(..., min_length=1, json_schema_extra={"example": "about"})
    title: str = Field(..., min_length=1)
    published: bool = True


class PageUpdate(PageBase):
    slug: Optional[str] = Field(None, min_length=1)
    title: Optional[str] = Field(None, min_length=1)
    published: Optional[bool] = None


class Page(PageBase):
    id: str
    slug: str
    title: str
    published: bool
    created_at: datetime
    updated_at: datetime
