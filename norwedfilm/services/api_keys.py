"""
Admin API key for scripted access.

A key rotated through the admin UI is stored in site settings and wins over
the ADMIN_API_KEY environment variable.
"""

import logging
import secrets
from datetime import datetime, timezone
from typing import Optional, Tuple

from sqlalchemy.orm import Session

from norwedfilm.core.config import settings
from norwedfilm.core.exceptions import ValidationError
from norwedfilm.crud import crud_site_setting

logger = logging.getLogger(__name__)

API_KEY_SETTING = "norwedfilm_api_key"
ROTATED_AT_SETTING = "norwedfilm_api_key_rotated_at"
ROTATED_BY_SETTING = "norwedfilm_api_key_rotated_by"
ROTATED_IP_SETTING = "norwedfilm_api_key_rotated_ip"

MIN_KEY_LENGTH = 32
KEY_PREFIX = "nwf_"


def configured_api_key(db: Session) -> Tuple[Optional[str], str]:
    """The active key and where it comes from: database, environment or none."""
    stored = crud_site_setting.site_setting.get_by_key(db, key=API_KEY_SETTING)
    if stored is not None and stored.value and stored.value.strip():
        return stored.value.strip(), "database"
    if settings.ADMIN_API_KEY:
        return settings.ADMIN_API_KEY, "environment"
    return None, "none"


def is_valid_api_key(db: Session, provided: Optional[str]) -> bool:
    if not provided:
        return False
    expected, _ = configured_api_key(db)
    if not expected:
        return False
    return secrets.compare_digest(provided.encode("utf-8"), expected.encode("utf-8"))


def get_status(db: Session) -> dict:
    _, source = configured_api_key(db)
    setting = crud_site_setting.site_setting

    def value(key: str) -> Optional[str]:
        row = setting.get_by_key(db, key=key)
        return row.value if row is not None and row.value else None

    return {
        "enabled": source != "none",
        "source": source,
        "rotated_at": value(ROTATED_AT_SETTING),
        "rotated_by": value(ROTATED_BY_SETTING),
        "rotated_ip": value(ROTATED_IP_SETTING),
    }


def rotate(
    db: Session, *, new_key: Optional[str], actor: str, source_ip: str
) -> dict:
    """Stores ``new_key`` (or a freshly generated one) as the active key."""
    new_key = (new_key or "").strip() or f"{KEY_PREFIX}{secrets.token_hex(32)}"
    if len(new_key) < MIN_KEY_LENGTH:
        raise ValidationError(
            f"API key must be at least {MIN_KEY_LENGTH} characters", field="apiKey"
        )

    rotated_at = datetime.now(timezone.utc).isoformat()
    crud_site_setting.site_setting.upsert_many(
        db,
        values={
            API_KEY_SETTING: new_key,
            ROTATED_AT_SETTING: rotated_at,
            ROTATED_BY_SETTING: actor,
            ROTATED_IP_SETTING: source_ip,
        },
    )
    logger.info(f"Admin API key rotated by {actor} from {source_ip}")
    return {
        "success": True,
        "api_key": new_key,
        "rotated_at": rotated_at,
        "rotated_by": actor,
        "rotated_ip": source_ip,
    }
