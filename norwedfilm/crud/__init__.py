# norwedfilm/crud/__init__.py

from .crud_project import project
from .crud_media import media
from .crud_page import page
from .crud_contact import contact
from .crud_review import review
from .crud_site_setting import site_setting
from .crud_hero_slide import hero_slide
from .crud_blog_post import blog_post
from .crud_blog_comment import blog_comment
from .crud_subscriber import subscriber
from .crud_client_gallery import client_gallery
from .crud_booking import booking, blocked_date
from .crud_dashboard import dashboard
