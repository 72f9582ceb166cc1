from datetime import datetime
from typing import Optional

from pydantic import Field

from norwedfilm.constants.statuses import SettingType
from norwedfilm.schemas.base import CamelModel


class SiteSettingCreate(CamelModel):
    key: str = Field(..., min_length=1, json_schema_extra={"example": "contact_email"})
    value: Optional[str] = None
    type: SettingType = SettingType.text


class SiteSettingUpsert(CamelModel):
    value: Optional[str] = None
    type: Optional[SettingType] = None


class SiteSetting(CamelModel):
    id: str
    key: str
    value: Optional[str] = None
    type: SettingType
    created_at: datetime
    updated_at: datetime
