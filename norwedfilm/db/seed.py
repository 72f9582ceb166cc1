#!/usr/bin/env python3
"""
Sample content for a fresh database.

Loads a handful of portfolio projects, reviews, hero slides and basic site
settings. Does nothing when any project already exists.

Usage:
    python -m norwedfilm.db.seed
"""
import logging

from sqlalchemy.orm import Session

from norwedfilm.crud import crud_hero_slide, crud_project, crud_review, crud_site_setting
from norwedfilm.db.session import SessionLocal
from norwedfilm.utils.slug import generate_slug

logger = logging.getLogger(__name__)

SAMPLE_PROJECTS = [
    {
        "title": "Emma & Lars",
        "description": "A magical summer wedding in the heart of Oslo, with an outdoor ceremony and an elegant reception.",
        "category": "wedding-photo",
        "cover_image": "https://images.unsplash.com/photo-1519741497674-611481863552?w=800",
        "date": "June 2024",
        "location": "Oslo, Norway",
        "featured": True,
        "sort_order": 1,
    },
    {
        "title": "Sofia & Henrik",
        "description": "An intimate coastal wedding with fjord views, vows exchanged at sunset.",
        "category": "wedding-video",
        "cover_image": "https://images.unsplash.com/photo-1511285560929-80b456fea0bc?w=800",
        "video_url": "https://player.vimeo.com/video/76979871",
        "date": "August 2024",
        "location": "Bergen, Norway",
        "featured": True,
        "sort_order": 2,
    },
    {
        "title": "Maria & Johan",
        "description": "A winter wedding under the northern lights.",
        "category": "wedding-photo",
        "cover_image": "https://images.unsplash.com/photo-1460978812857-470ed1c77af0?w=800",
        "date": "December 2024",
        "location": "Tromsø, Norway",
        "featured": True,
        "sort_order": 3,
    },
    {
        "title": "Anna & Erik",
        "description": "A rustic countryside celebration at a historic Norwegian farm.",
        "category": "wedding-video",
        "cover_image": "https://images.unsplash.com/photo-1583939003579-730e3918a45a?w=800",
        "video_url": "https://player.vimeo.com/video/76979871",
        "date": "September 2024",
        "location": "Lillehammer, Norway",
        "sort_order": 4,
    },
    {
        "title": "Ingrid & Thomas",
        "description": "A city wedding in the Old Town of Stavanger.",
        "category": "wedding-photo",
        "cover_image": "https://images.unsplash.com/photo-1606216794074-735e91aa2c92?w=800",
        "date": "July 2024",
        "location": "Stavanger, Norway",
        "sort_order": 5,
    },
]

SAMPLE_REVIEWS = [
    {
        "name": "Emma & Lars Andersen",
        "event_date": "June 2024",
        "content": "Norwed Film captured our wedding day perfectly. Every photo and every frame of video brings us back to those moments.",
        "featured": True,
    },
    {
        "name": "Sofia & Henrik Berg",
        "event_date": "August 2024",
        "content": "We couldn't be happier with our wedding film. The team made us feel completely at ease the entire day.",
        "featured": True,
    },
    {
        "name": "Maria & Johan Nilsen",
        "event_date": "December 2024",
        "content": "They captured not just images, but the emotions and atmosphere of our day. Our winter photos are like works of art.",
        "featured": True,
    },
    {
        "name": "Anna & Erik Olsen",
        "event_date": "September 2024",
        "content": "The attention to detail was remarkable. Our wedding video lets us relive the day every time we watch it.",
    },
    {
        "name": "Kristine & Magnus Hansen",
        "event_date": "May 2024",
        "content": "Professional, creative and incredibly kind. Absolutely breathtaking images that tell our story.",
    },
]

SAMPLE_HERO_SLIDES = [
    {
        "image_url": "https://images.unsplash.com/photo-1519741497674-611481863552?w=1920",
        "title": "Love Stories",
        "subtitle": "Elegantly Told",
        "cta_text": "Book Us",
        "cta_link": "/contact",
        "sort_order": 1,
    },
    {
        "image_url": "https://images.unsplash.com/photo-1511285560929-80b456fea0bc?w=1920",
        "title": "Timeless Moments",
        "subtitle": "Beautifully Captured",
        "cta_text": "View Portfolio",
        "cta_link": "/portfolio/wedding-photo",
        "sort_order": 2,
    },
    {
        "image_url": "https://images.unsplash.com/photo-1460978812857-470ed1c77af0?w=1920",
        "title": "Your Wedding",
        "subtitle": "Our Passion",
        "cta_text": "Contact Us",
        "cta_link": "/contact",
        "sort_order": 3,
    },
]

SAMPLE_SETTINGS = {
    "siteName": "Norwed Film",
    "siteTagline": "Love stories elegantly told",
    "contactEmail": "hello@norwedfilm.no",
    "contactPhone": "+47 123 45 678",
    "address": "Oslo, Norway",
    "instagramUrl": "https://instagram.com/norwedfilm",
}


def seed_database(db: Session) -> bool:
    """Inserts the sample content. Returns False if the database already had projects."""
    if crud_project.project.count(db) > 0:
        logger.info("Database already seeded, skipping")
        return False

    for data in SAMPLE_PROJECTS:
        crud_project.project.create(
            db, obj_in={**data, "slug": generate_slug(data["title"], fallback="project")}
        )
    for data in SAMPLE_REVIEWS:
        crud_review.review.create(db, obj_in={**data, "event_type": "Wedding", "rating": 5})
    for data in SAMPLE_HERO_SLIDES:
        crud_hero_slide.hero_slide.create(db, obj_in=data)
    crud_site_setting.site_setting.upsert_many(db, values=SAMPLE_SETTINGS)

    logger.info(
        f"Seeded {len(SAMPLE_PROJECTS)} projects, {len(SAMPLE_REVIEWS)} reviews "
        f"and {len(SAMPLE_HERO_SLIDES)} hero slides"
    )
    return True


def main():
    logging.basicConfig(level=logging.INFO)
    db = SessionLocal()
    try:
        seed_database(db)
    finally:
        db.close()


if __name__ == "__main__":
    main()
