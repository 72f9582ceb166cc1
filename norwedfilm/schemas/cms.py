from typing import Any, Dict, List, Optional

from pydantic import Field

from norwedfilm.schemas.base import CamelModel


class LandingTestimonial(CamelModel):
    """Landing page testimonial; stored as a Review."""

    quote: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    role: Optional[str] = None
    avatar_url: Optional[str] = None
    is_active: bool = True


class NavigationIn(CamelModel):
    items: List[Dict[str, Any]]
