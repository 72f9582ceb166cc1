from datetime import datetime
from typing import Optional

from pydantic import Field

from norwedfilm.schemas.base import CamelModel


class ReviewBase(CamelModel):
    event_type: Optional[str] = None
    event_date: Optional[str] = None
    photo: Optional[str] = None


class ReviewCreate(ReviewBase):
    name: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    rating: int = Field(5, ge=1, le=5)
    featured: bool = False
    published: bool = True


class ReviewUpdate(ReviewBase):
    name: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = Field(None, min_length=1)
    rating: Optional[int] = Field(None, ge=1, le=5)
    featured: Optional[bool] = None
    published: Optional[bool] = None


class Review(ReviewBase):
    id: str
    name: str
    content: str
    rating: int
    featured: bool
    published: bool
    created_at: datetime
