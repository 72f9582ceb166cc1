# norwedfilm/models/hero_slide.py
import uuid
from sqlalchemy import Boolean, Column, DateTime, Integer, String, text
from sqlalchemy.sql import func
from norwedfilm.db.base_class import Base


class HeroSlide(Base):
    __tablename__ = "hero_slides"

    id = Column(
        String, primary_key=True, default=lambda: f"hs_{uuid.uuid4().hex[:12]}"
    )
    image_url = Column(String, nullable=False)
    title = Column(String, nullable=True)
    subtitle = Column(String, nullable=True)
    cta_text = Column(String, nullable=True)
    cta_link = Column(String, nullable=True)
    sort_order = Column(Integer, nullable=False, default=0, server_default=text("0"))
    active = Column(Boolean, nullable=False, default=True, server_default=text("true"))
    created_at = Column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
