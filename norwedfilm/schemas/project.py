from datetime import datetime
from typing import Optional

from pydantic import Field

from norwedfilm.constants.statuses import ProjectCategory
from norwedfilm.schemas.base import CamelModel


class ProjectBase(CamelModel):
    description: Optional[str] = None
    cover_image: Optional[str] = Field(
        None, json_schema_extra={"example": "https://images.unsplash.com/photo-1519741497674"}
    )
    video_url: Optional[str] = None
    date: Optional[str] = Field(None, json_schema_extra={"example": "June 2024"})
    location: Optional[str] = Field(None, json_schema_extra={"example": "Oslo, Norway"})


class ProjectCreate(ProjectBase):
    title: str = Field(..., min_length=1, json_schema_extra={"example": "Emma & Lars"})
    slug: str = Field(..., min_length=1, json_schema_extra={"example": "emma-lars"})
    category: ProjectCategory
    featured: bool = False
    published: bool = True
    sort_order: int = 0


class ProjectUpdate(ProjectBase):
    title: Optional[str] = Field(None, min_length=1)
    slug: Optional[str] = Field(None, min_length=1)
    category: Optional[ProjectCategory] = None
    featured: Optional[bool] = None
    published: Optional[bool] = None
    sort_order: Optional[int] = None


class Project(ProjectBase):
    id: str
    title: str
    slug: str
    category: ProjectCategory
    featured: bool
    published: bool
    sort_order: int
    created_at: datetime
    updated_at: datetime
