# norwedfilm/crud/crud_site_setting.py
"""
Key/value site settings.

Besides plain admin edits, settings hold the CMS documents (navigation,
landing features, partners, ...) as JSON text, so this module also offers
typed reads of a value.
"""
import json
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from .base import CRUDBase
from norwedfilm.constants.statuses import SettingType
from norwedfilm.core.exceptions import NotFoundError
from norwedfilm.models.site_setting import SiteSetting
from norwedfilm.schemas.site_setting import SiteSettingCreate, SiteSettingUpsert

logger = logging.getLogger(__name__)

_TRUTHY = {"true", "1", "yes", "on"}


class CRUDSiteSetting(CRUDBase[SiteSetting, SiteSettingCreate, SiteSettingUpsert]):
    resource_name = "Setting"

    def get_multi(
        self, db: Session, *, skip: int = 0, limit: int | None = None
    ) -> List[SiteSetting]:
        return db.query(self.model).order_by(self.model.key.asc()).all()

    def get_by_key(self, db: Session, *, key: str) -> Optional[SiteSetting]:
        return db.query(self.model).filter(self.model.key == key).first()

    def upsert(
        self,
        db: Session,
        *,
        key: str,
        value: Optional[str],
        type: Optional[str] = None,
        commit: bool = True,
    ) -> SiteSetting:
        """
        Inserts the key or replaces its value. The type of an existing row
        only changes when one is given explicitly.
        """
        db_obj = self.get_by_key(db, key=key)
        if db_obj is None:
            db_obj = self.model(
                key=key, value=value, type=type or SettingType.text.value
            )
        else:
            db_obj.value = value
            if type:
                db_obj.type = type
        db.add(db_obj)
        if commit:
            self._commit(db)
            db.refresh(db_obj)
        return db_obj

    def upsert_many(self, db: Session, *, values: Dict[str, Any]) -> List[SiteSetting]:
        """Bulk form save: every key is written in a single commit."""
        rows = []
        for key, value in values.items():
            if value is not None and not isinstance(value, str):
                value = json.dumps(value)
            rows.append(self.upsert(db, key=key, value=value, commit=False))
            # Make the pending row visible to the next lookup of the same key.
            db.flush()
        self._commit(db)
        for row in rows:
            db.refresh(row)
        return rows

    def remove_by_key(self, db: Session, *, key: str) -> SiteSetting:
        db_obj = self.get_by_key(db, key=key)
        if db_obj is None:
            raise NotFoundError(self.resource_name, key)
        db.delete(db_obj)
        db.commit()
        return db_obj

    def get_json(self, db: Session, *, key: str, default: Any) -> Any:
        """
        Parsed JSON value of a setting, or ``default`` when the key is
        missing, empty or holds malformed JSON.
        """
        db_obj = self.get_by_key(db, key=key)
        if db_obj is None or not db_obj.value:
            return default
        try:
            return json.loads(db_obj.value)
        except ValueError:
            logger.warning(f"Setting '{key}' does not hold valid JSON; using default")
            return default

    def set_json(self, db: Session, *, key: str, value: Any) -> SiteSetting:
        return self.upsert(
            db, key=key, value=json.dumps(value), type=SettingType.json.value
        )


def parse_setting_value(setting: SiteSetting) -> Any:
    """Reads a setting according to its declared type."""
    if setting.value is None:
        return None
    if setting.type == SettingType.boolean.value:
        return setting.value.strip().lower() in _TRUTHY
    if setting.type == SettingType.json.value:
        try:
            return json.loads(setting.value)
        except ValueError:
            return setting.value
    return setting.value


site_setting = CRUDSiteSetting(SiteSetting)
