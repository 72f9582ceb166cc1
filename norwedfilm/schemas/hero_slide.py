from datetime import datetime
from typing import Optional

from pydantic import Field

from norwedfilm.schemas.base import CamelModel


class HeroSlideBase(CamelModel):
    title: Optional[str] = None
    subtitle: Optional[str] = None
    cta_text: Optional[str] = None
    cta_link: Optional[str] = None


class HeroSlideCreate(HeroSlideBase):
    image_url: str = Field(..., min_length=1)
    sort_order: int = 0
    active: bool = True


class HeroSlideUpdate(HeroSlideBase):
    image_url: Optional[str] = Field(None, min_length=1)
    sort_order: Optional[int] = None
    active: Optional[bool] = None


class HeroSlide(HeroSlideBase):
    id: str
    image_url: str
    sort_order: int
    active: bool
    created_at: datetime
