# norwedfilm/api/api.py

from fastapi import APIRouter
from norwedfilm.api.endpoints import (
    public,
    blog,
    galleries,
    auth,
    cms,
    admin_projects,
    admin_media,
    admin_pages,
    admin_contacts,
    admin_reviews,
    admin_hero_slides,
    admin_blog,
    admin_subscribers,
    admin_bookings,
    admin_galleries,
    admin_settings,
    admin_dashboard,
)

# Everything served under /api. The RSS feed lives at the site root and is
# mounted separately in main.py.
api_router = APIRouter()

api_router.include_router(public.router)
api_router.include_router(blog.router)
api_router.include_router(galleries.router)
api_router.include_router(auth.router)
api_router.include_router(cms.router)
api_router.include_router(admin_projects.router)
api_router.include_router(admin_media.router)
api_router.include_router(admin_pages.router)
api_router.include_router(admin_contacts.router)
api_router.include_router(admin_reviews.router)
api_router.include_router(admin_hero_slides.router)
api_router.include_router(admin_blog.router)
api_router.include_router(admin_subscribers.router)
api_router.include_router(admin_bookings.router)
api_router.include_router(admin_bookings.blocked_dates_router)
api_router.include_router(admin_galleries.router)
api_router.include_router(admin_settings.router)
api_router.include_router(admin_dashboard.router)
