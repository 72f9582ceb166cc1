# norwedfilm/api/endpoints/auth.py
"""
Admin sign-in through Supabase (Google) and the service's own session.
"""
import logging
from datetime import datetime, timezone
from typing import Optional
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import RedirectResponse

from norwedfilm.api import deps
from norwedfilm.core.config import settings
from norwedfilm.core.exceptions import ForbiddenError
from norwedfilm.core.limiter import limiter
from norwedfilm.core.security import SESSION_COOKIE_NAME, create_session_token
from norwedfilm.schemas.token import (
    SessionResponse,
    SessionUser,
    SupabaseSessionRequest,
    TokenPayload,
)
from norwedfilm.services import supabase_auth
from norwedfilm.utils.security import safe_next_path

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Auth"])


@router.get("/login")
def login():
    return RedirectResponse("/admin/login", status_code=302)


@router.get("/login/supabase")
def login_with_supabase(request: Request, next: Optional[str] = None):
    """
    Sends the browser to the Google sign-in page. After sign-in Supabase
    returns to /admin/login/callback, which posts the token to
    /api/auth/supabase/session and then follows `next`.
    """
    if not supabase_auth.is_configured():
        return RedirectResponse(
            "/admin/login?error=supabase_not_configured", status_code=302
        )

    callback = request.url.replace(
        path="/admin/login/callback", query=urlencode({"next": safe_next_path(next)})
    )
    return RedirectResponse(
        supabase_auth.build_authorize_url(str(callback)), status_code=302
    )


@router.post("/auth/supabase/session", response_model=SessionResponse)
@limiter.limit("20/minute")
def create_session(
    request: Request,
    response: Response,
    session_in: SupabaseSessionRequest,
):
    """Exchanges a Supabase access token for an admin session."""
    data = supabase_auth.SupabaseAuthClient().get_user(session_in.access_token)
    user = supabase_auth.session_user_from_supabase(data)
    if not supabase_auth.is_allowed_admin_email(user.email):
        logger.warning(f"Rejected admin sign-in for {user.email}")
        raise ForbiddenError("Email is not allowed for admin access")

    token = create_session_token(str(data.get("id") or user.email), user)
    response.set_cookie(
        SESSION_COOKIE_NAME,
        token,
        max_age=settings.SESSION_MAX_AGE_SECONDS,
        httponly=True,
        samesite="lax",
        secure=settings.ENV != "local",
    )
    logger.info(f"Admin session started for {user.email}")
    return SessionResponse(token=token, user=user)


@router.get("/auth/user", response_model=SessionUser)
def get_user(current_user: TokenPayload = Depends(deps.get_session_user)):
    return current_user


@router.get("/logout")
def logout():
    response = RedirectResponse("/", status_code=302)
    response.delete_cookie(SESSION_COOKIE_NAME)
    return response


@router.get("/admin/auth/health")
def api_key_health(principal: deps.ApiKeyPrincipal = Depends(deps.get_api_key_admin)):
    """Lets integrations verify their API key."""
    return {
        "ok": True,
        "auth": "api-key",
        "service": "norwedfilm",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
