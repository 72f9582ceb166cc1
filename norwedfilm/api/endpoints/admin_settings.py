# norwedfilm/api/endpoints/admin_settings.py
from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, Response, status
from sqlalchemy.orm import Session

from norwedfilm.api import deps
from norwedfilm.core.exceptions import ValidationError
from norwedfilm.crud import crud_site_setting
from norwedfilm.db.session import get_db
from norwedfilm.schemas.site_setting import (
    SiteSetting,
    SiteSettingCreate,
    SiteSettingUpsert,
)
from norwedfilm.services.query_cache import QueryCache, resources_for

router = APIRouter(prefix="/admin/settings", tags=["Admin: Settings"])


@router.get("", response_model=List[SiteSetting])
def list_settings(
    db: Session = Depends(get_db),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    return crud_site_setting.site_setting.get_multi(db)


@router.post("", response_model=SiteSetting, status_code=status.HTTP_201_CREATED)
def create_setting(
    setting_in: SiteSettingCreate,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    """Adds a single setting. A key that already exists gives 409."""
    setting = crud_site_setting.site_setting.create(db, obj_in=setting_in)
    cache.invalidate(*resources_for("settings"))
    return setting


@router.patch("", response_model=List[SiteSetting])
def update_settings(
    values: Dict[str, Any] = Body(..., examples=[{"contact_email": "post@norwedfilm.no"}]),
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    """
    Saves the settings form: each `{key: value}` pair is created or
    overwritten. Non-string values are stored as JSON text.
    """
    if not values:
        raise ValidationError("No settings to save")
    settings_out = crud_site_setting.site_setting.upsert_many(db, values=values)
    cache.invalidate(*resources_for("settings"))
    return settings_out


@router.put("/{key}", response_model=SiteSetting)
def upsert_setting(
    key: str,
    setting_in: SiteSettingUpsert,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    setting = crud_site_setting.site_setting.upsert(
        db, key=key, value=setting_in.value, type=setting_in.type
    )
    cache.invalidate(*resources_for("settings"))
    return setting


@router.delete("/{key}", status_code=status.HTTP_204_NO_CONTENT)
def delete_setting(
    key: str,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    crud_site_setting.site_setting.remove_by_key(db, key=key)
    cache.invalidate(*resources_for("settings"))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
