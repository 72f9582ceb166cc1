# norwedfilm/models/__init__.py
# Import all models so SQLAlchemy can resolve relationships by name
# and Alembic sees every table on Base.metadata.

from norwedfilm.db.base_class import Base
from norwedfilm.models.project import Project
from norwedfilm.models.media import Media
from norwedfilm.models.client_gallery import ClientGallery
from norwedfilm.models.page import Page
from norwedfilm.models.contact import Contact
from norwedfilm.models.review import Review
from norwedfilm.models.site_setting import SiteSetting
from norwedfilm.models.hero_slide import HeroSlide
from norwedfilm.models.blog_post import BlogPost
from norwedfilm.models.blog_comment import BlogComment
from norwedfilm.models.subscriber import Subscriber
from norwedfilm.models.booking import Booking
from norwedfilm.models.blocked_date import BlockedDate
