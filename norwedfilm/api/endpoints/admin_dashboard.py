# norwedfilm/api/endpoints/admin_dashboard.py
import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from norwedfilm.api import deps
from norwedfilm.crud import crud_dashboard
from norwedfilm.db.session import get_db
from norwedfilm.schemas.stats import DashboardStats
from norwedfilm.schemas.token import ApiKeyRotated, ApiKeyRotateRequest, ApiKeyStatus
from norwedfilm.services import api_keys
from norwedfilm.services.query_cache import QueryCache

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Admin: Dashboard"])


@router.get("/stats", response_model=DashboardStats)
def get_stats(
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    """
    Headline numbers for the dashboard. Cached until the next write to any
    of the counted tables.
    """
    return cache.remember(
        cache.key("stats", "dashboard"),
        lambda: DashboardStats.model_validate(
            crud_dashboard.dashboard.get_stats(db)
        ).model_dump(mode="json", by_alias=True),
    )


@router.get("/api-key/status", response_model=ApiKeyStatus)
def get_api_key_status(
    db: Session = Depends(get_db),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    """Whether an admin API key is active and when it was last rotated. The key is not returned."""
    return api_keys.get_status(db)


@router.post("/api-key/rotate", response_model=ApiKeyRotated)
def rotate_api_key(
    request: Request,
    rotate_in: ApiKeyRotateRequest,
    db: Session = Depends(get_db),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    """
    Replaces the admin API key. The new key is shown once, in this response.
    """
    forwarded_for = request.headers.get("x-forwarded-for", "")
    source_ip = forwarded_for.split(",")[0].strip() or (
        request.client.host if request.client else "unknown"
    )
    return api_keys.rotate(
        db,
        new_key=rotate_in.api_key,
        actor=current_admin.email,
        source_ip=source_ip,
    )
