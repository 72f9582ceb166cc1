"""
Token exchange with the Supabase auth server.

The admin UI signs in with Google through Supabase and hands us the
resulting access token; we ask Supabase who it belongs to.
"""

import logging
from typing import Any, Dict
from urllib.parse import urlencode

import httpx

from norwedfilm.core.config import settings
from norwedfilm.core.exceptions import AuthError, ExternalServiceError
from norwedfilm.schemas.token import SessionUser

logger = logging.getLogger(__name__)

SERVICE_NAME = "supabase"


def is_configured() -> bool:
    return bool(settings.SUPABASE_URL and settings.SUPABASE_ANON_KEY)


def build_authorize_url(callback_url: str) -> str:
    """Google sign-in URL that returns to ``callback_url`` with the token."""
    query = urlencode({
        "provider": "google",
        "flow_type": "implicit",
        "redirect_to": callback_url,
    })
    return f"{settings.SUPABASE_URL.rstrip('/')}/auth/v1/authorize?{query}"


class SupabaseAuthClient:
    def __init__(self, timeout: float = 10.0):
        self.base_url = (settings.SUPABASE_URL or "").rstrip("/")
        self.anon_key = settings.SUPABASE_ANON_KEY
        self.timeout = timeout

    def get_user(self, access_token: str) -> Dict[str, Any]:
        """
        Calls GET /auth/v1/user with the visitor's token.
        Raises AuthError for a token Supabase rejects.
        """
        if not is_configured():
            raise ExternalServiceError(
                "Supabase is not configured", service=SERVICE_NAME, status_code=500
            )

        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.get(
                    f"{self.base_url}/auth/v1/user",
                    headers={
                        "apikey": self.anon_key,
                        "Authorization": f"Bearer {access_token}",
                    },
                )
        except httpx.HTTPError as e:
            logger.error(f"Supabase auth request failed: {e}")
            raise ExternalServiceError(
                "Could not reach the identity provider", service=SERVICE_NAME
            )

        if response.status_code in (401, 403):
            raise AuthError("Invalid Supabase session")
        if response.status_code != 200:
            logger.warning(
                f"Supabase auth returned {response.status_code}: {response.text}"
            )
            raise ExternalServiceError(
                "Identity provider error", service=SERVICE_NAME
            )
        return response.json()


def session_user_from_supabase(data: Dict[str, Any]) -> SessionUser:
    """Maps a Supabase user record onto the admin session user."""
    email = (data.get("email") or "").lower()
    if not email:
        raise AuthError("Supabase user email is missing")

    metadata = data.get("user_metadata") or {}
    full_name = metadata.get("full_name") if isinstance(metadata.get("full_name"), str) else ""
    name_parts = full_name.split()

    def text(key: str):
        value = metadata.get(key)
        return value if isinstance(value, str) and value else None

    return SessionUser(
        email=email,
        first_name=text("given_name") or (name_parts[0] if name_parts else None) or "Admin",
        last_name=text("family_name") or (" ".join(name_parts[1:]) or None),
        profile_image_url=text("avatar_url") or text("picture"),
    )


def is_allowed_admin_email(email: str) -> bool:
    # An empty allow-list admits every verified account.
    allowed = settings.admin_emails
    if not allowed:
        return True
    return email.lower() in allowed
