"""
CMS content stored in site settings.

The landing page blocks (features, partners, section headings, hero text),
the header navigation, published versions and the activity log are JSON
documents kept under fixed setting keys. Public reads resolve them against
compiled-in defaults so the site never renders an empty menu or an empty
feature section.
"""

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Union

from sqlalchemy.orm import Session

from norwedfilm.core.exceptions import NotFoundError
from norwedfilm.crud import crud_hero_slide, crud_review, crud_site_setting

logger = logging.getLogger(__name__)

NAVIGATION_KEY = "cms_navigation_header"
FEATURES_KEY = "cms_landing_features"
PARTNERS_KEY = "cms_landing_partners"
SECTIONS_KEY = "cms_landing_sections"
HERO_META_KEY = "cms_landing_hero_meta"
VERSIONS_KEY = "cms_landing_versions"
ACTIVITY_LOG_KEY = "cms_activity_log"
PUBLISH_STATUS_KEY = "cms_landing_publish_status"
PUBLISHED_AT_KEY = "cms_landing_published_at"

MAX_VERSIONS = 50
MAX_ACTIVITY_ENTRIES = 200

DEFAULT_NAVIGATION: List[Dict[str, Any]] = [
    {"id": 1, "label": "Home", "url": "/", "order": 0, "isActive": True},
    {"id": 2, "label": "About", "url": "/about", "order": 1, "isActive": True},
    {"id": 3, "label": "Portfolio", "url": "/portfolio/wedding-photo", "order": 2, "isActive": True},
    {"id": 4, "label": "Reviews", "url": "/reviews", "order": 3, "isActive": True},
    {"id": 5, "label": "Contact", "url": "/contact", "order": 4, "isActive": True},
]

DEFAULT_FEATURES: List[Dict[str, Any]] = [
    {
        "id": 1,
        "icon": "Camera",
        "title": "Wedding Photography",
        "description": "Authentic, candid moments captured with an artistic eye. We document your day as it unfolds naturally.",
        "display_order": 0,
        "is_active": True,
    },
    {
        "id": 2,
        "icon": "Film",
        "title": "Cinematic Films",
        "description": "Beautiful wedding films that tell your love story with emotion, music, and stunning cinematography.",
        "display_order": 1,
        "is_active": True,
    },
    {
        "id": 3,
        "icon": "Award",
        "title": "Award-Winning",
        "description": "Recognized for our creative vision and dedication to capturing the essence of each unique celebration.",
        "display_order": 2,
        "is_active": True,
    },
    {
        "id": 4,
        "icon": "Heart",
        "title": "Personal Approach",
        "description": "We believe in building genuine connections with our couples to capture authentic emotions.",
        "display_order": 3,
        "is_active": True,
    },
]

DEFAULT_SECTIONS: Dict[str, Optional[str]] = {
    "features_title": "Funksjoner",
    "features_subtitle": None,
    "testimonials_title": "Anmeldelser",
    "testimonials_subtitle": None,
    "cta_title": "Klar for å booke?",
    "cta_subtitle": None,
    "cta_button_text": "Kontakt oss",
    "contact_title": "Kontakt",
    "contact_subtitle": None,
    "contact_email": "hello@norwedfilm.no",
    "contact_phone": "+47 123 45 678",
    "partners_title": "Samarbeidspartnere",
    "partners_subtitle": None,
}


# --- Resolution against defaults ---


@dataclass(frozen=True)
class CmsSourced:
    items: List[Dict[str, Any]] = field(default_factory=list)
    source: str = "cms"


@dataclass(frozen=True)
class DefaultItems:
    items: List[Dict[str, Any]] = field(default_factory=list)
    source: str = "default"


ResolvedItems = Union[CmsSourced, DefaultItems]


def _flag(item: Dict[str, Any], *names: str, default: bool = True) -> bool:
    for name in names:
        if name in item and item[name] is not None:
            return item[name] is not False
    return default


def _position(item: Dict[str, Any], *names: str) -> float:
    for name in names:
        value = item.get(name)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return value
    return 0


def resolve_items(
    cms_items: Optional[List[Dict[str, Any]]],
    defaults: List[Dict[str, Any]],
) -> ResolvedItems:
    """
    Keeps the active CMS items (``isActive``/``is_active``, true when absent)
    in ``order``/``display_order`` order (0 when absent). When nothing is
    left the defaults are returned instead, filtered and ordered the same way.
    """

    def prepare(items):
        active = [
            item
            for item in items
            if isinstance(item, dict) and _flag(item, "isActive", "is_active")
        ]
        # sorted() is stable: equal positions keep their stored order.
        return sorted(active, key=lambda item: _position(item, "order", "display_order"))

    items = prepare(cms_items or [])
    if items:
        return CmsSourced(items=items)
    return DefaultItems(items=prepare(defaults))


# --- Payload builders ---


def _as_list(value: Any) -> List[Dict[str, Any]]:
    return value if isinstance(value, list) else []


def build_navigation_payload(db: Session) -> Dict[str, Any]:
    """Stored header navigation, or the default menu when none is stored."""
    items = crud_site_setting.site_setting.get_json(db, key=NAVIGATION_KEY, default=None)
    if items is None:
        return {"items": DEFAULT_NAVIGATION}
    return {"items": _as_list(items)}


def build_public_navigation_payload(db: Session) -> Dict[str, Any]:
    stored = crud_site_setting.site_setting.get_json(db, key=NAVIGATION_KEY, default=[])
    resolved = resolve_items(_as_list(stored), DEFAULT_NAVIGATION)
    return {"items": resolved.items, "source": resolved.source}


def _build_hero(db: Session) -> Optional[Dict[str, Any]]:
    slides = crud_hero_slide.hero_slide.get_multi(db)
    if not slides:
        return None
    first = slides[0]
    meta = crud_site_setting.site_setting.get_json(db, key=HERO_META_KEY, default={})
    if not isinstance(meta, dict):
        meta = {}

    def pick(name: str, fallback: Any) -> Any:
        value = meta.get(name)
        return fallback if value is None else value

    return {
        "id": first.id,
        "title": pick("title", first.title or ""),
        "title_highlight": pick("title_highlight", None),
        "subtitle": pick("subtitle", first.subtitle),
        "cta_primary_text": pick("cta_primary_text", first.cta_text),
        "cta_primary_url": pick("cta_primary_url", first.cta_link),
        "cta_secondary_text": pick("cta_secondary_text", None),
        "cta_secondary_url": pick("cta_secondary_url", None),
        "background_image": pick("background_image", first.image_url),
    }


def testimonial_from_review(review, display_order: int = 0) -> Dict[str, Any]:
    return {
        "id": review.id,
        "quote": review.content,
        "name": review.name,
        "role": review.event_type or "Kunde",
        "avatar_url": review.photo,
        "display_order": display_order,
        "is_active": review.published,
    }


def review_data_from_testimonial(data: Dict[str, Any]) -> Dict[str, Any]:
    """Review columns for a landing testimonial. Testimonials always rate 5."""
    return {
        "name": data["name"],
        "content": data["quote"],
        "event_type": data.get("role"),
        "photo": data.get("avatar_url"),
        "published": data.get("is_active", True),
        "rating": 5,
    }


def _build_testimonials(db: Session) -> List[Dict[str, Any]]:
    reviews = crud_review.review.get_multi(db)
    return [
        testimonial_from_review(review, index) for index, review in enumerate(reviews)
    ]


def build_landing_payload(db: Session) -> Dict[str, Any]:
    """Landing page content as stored, for the editor."""
    setting = crud_site_setting.site_setting
    sections = setting.get_json(db, key=SECTIONS_KEY, default=None)
    return {
        "hero": _build_hero(db),
        "features": _as_list(setting.get_json(db, key=FEATURES_KEY, default=[])),
        "testimonials": _build_testimonials(db),
        "partners": _as_list(setting.get_json(db, key=PARTNERS_KEY, default=[])),
        "sections": sections if isinstance(sections, dict) else dict(DEFAULT_SECTIONS),
    }


def build_public_landing_payload(db: Session) -> Dict[str, Any]:
    """Landing page content as the public site renders it."""
    payload = build_landing_payload(db)
    features = resolve_items(payload["features"], DEFAULT_FEATURES)
    partners = resolve_items(payload["partners"], [])
    testimonials = resolve_items(payload["testimonials"], [])
    payload.update(
        features=features.items,
        features_source=features.source,
        partners=partners.items,
        testimonials=testimonials.items,
    )
    return payload


# --- Editor operations ---


def next_numeric_id(items: List[Dict[str, Any]]) -> int:
    """One more than the largest numeric id in the list, ignoring non-numeric ids."""
    highest = 0
    for item in items:
        try:
            highest = max(highest, int(item.get("id")))
        except (TypeError, ValueError):
            continue
    return highest + 1


class CmsList:
    """A JSON list of blocks stored under one setting key (features, partners)."""

    def __init__(self, key: str, resource_name: str):
        self.key = key
        self.resource_name = resource_name

    def all(self, db: Session) -> List[Dict[str, Any]]:
        return _as_list(crud_site_setting.site_setting.get_json(db, key=self.key, default=[]))

    def add(self, db: Session, *, data: Dict[str, Any]) -> Dict[str, Any]:
        items = self.all(db)
        created = {**data, "id": next_numeric_id(items)}
        crud_site_setting.site_setting.set_json(db, key=self.key, value=items + [created])
        return created

    def replace(self, db: Session, *, item_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        items = self.all(db)
        for index, item in enumerate(items):
            if str(item.get("id")) == str(item_id):
                items[index] = {**item, **data, "id": item.get("id")}
                crud_site_setting.site_setting.set_json(db, key=self.key, value=items)
                return items[index]
        raise NotFoundError(self.resource_name, item_id)

    def remove(self, db: Session, *, item_id: str) -> None:
        items = self.all(db)
        remaining = [item for item in items if str(item.get("id")) != str(item_id)]
        if len(remaining) == len(items):
            raise NotFoundError(self.resource_name, item_id)
        crud_site_setting.site_setting.set_json(db, key=self.key, value=remaining)


features = CmsList(FEATURES_KEY, "Feature")
partners = CmsList(PARTNERS_KEY, "Partner")


def save_hero(db: Session, *, data: Dict[str, Any]) -> None:
    """
    Writes the hero text onto the first hero slide (creating one if there is
    none) and keeps the full form, including fields slides lack, as hero meta.
    """
    slides = crud_hero_slide.hero_slide.get_multi(db)
    slide_data = {
        "title": data.get("title") or "",
        "subtitle": data.get("subtitle") or "",
        "cta_text": data.get("cta_primary_text") or "",
        "cta_link": data.get("cta_primary_url") or "",
        "active": True,
    }
    if slides:
        first = slides[0]
        slide_data["image_url"] = data.get("background_image") or first.image_url
        crud_hero_slide.hero_slide.update(db, db_obj=first, obj_in=slide_data)
    else:
        slide_data["image_url"] = data.get("background_image") or ""
        slide_data["sort_order"] = 0
        crud_hero_slide.hero_slide.create(db, obj_in=slide_data)

    crud_site_setting.site_setting.set_json(db, key=HERO_META_KEY, value=data)


def save_sections(db: Session, *, data: Dict[str, Any]) -> None:
    crud_site_setting.site_setting.set_json(db, key=SECTIONS_KEY, value=data)


def save_navigation(db: Session, *, items: List[Dict[str, Any]], user_name: str) -> None:
    crud_site_setting.site_setting.set_json(db, key=NAVIGATION_KEY, value=items)
    append_activity(
        db,
        action="update",
        resource_type="navigation",
        resource_name="Header navigation",
        user_name=user_name,
    )


def get_activity_log(db: Session) -> List[Dict[str, Any]]:
    return _as_list(crud_site_setting.site_setting.get_json(db, key=ACTIVITY_LOG_KEY, default=[]))


def append_activity(
    db: Session,
    *,
    action: str,
    resource_type: str,
    resource_id: Any = None,
    resource_name: Optional[str] = None,
    user_name: str = "Admin",
) -> Dict[str, Any]:
    entry = {
        "id": str(uuid.uuid4()),
        "action": action,
        "resource_type": resource_type,
        "resource_id": resource_id,
        "resource_name": resource_name,
        "user_name": user_name,
        "created_at": datetime.now(timezone.utc).isoformat(),
    }
    log = [entry] + get_activity_log(db)
    crud_site_setting.site_setting.set_json(
        db, key=ACTIVITY_LOG_KEY, value=log[:MAX_ACTIVITY_ENTRIES]
    )
    return entry


def publish_landing(db: Session, *, user_name: str = "Admin") -> Dict[str, Any]:
    """
    Marks the landing page published and stores a snapshot of it as the
    next version. Only the newest versions are kept.
    """
    setting = crud_site_setting.site_setting
    published_at = datetime.now(timezone.utc).isoformat()
    setting.upsert(db, key=PUBLISH_STATUS_KEY, value="published", type="text")
    setting.upsert(db, key=PUBLISHED_AT_KEY, value=published_at, type="text")

    versions = [
        v for v in _as_list(setting.get_json(db, key=VERSIONS_KEY, default=[]))
        if isinstance(v, dict)
    ]
    latest = max(
        (v["version"] for v in versions if isinstance(v.get("version"), int)),
        default=0,
    )
    version = {
        "id": str(uuid.uuid4()),
        "type": "landing",
        "version": latest + 1,
        "created_at": published_at,
        "snapshot": build_landing_payload(db),
    }
    setting.set_json(db, key=VERSIONS_KEY, value=([version] + versions)[:MAX_VERSIONS])
    append_activity(
        db,
        action="publish",
        resource_type="landing_page",
        resource_name=f"Landing page v{version['version']}",
        user_name=user_name,
    )
    logger.info(f"Landing page published as version {version['version']}")
    return version
