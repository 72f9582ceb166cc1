# norwedfilm/api/deps.py
from typing import Optional, Union

from fastapi import Depends, Request, Security
from fastapi.security import APIKeyHeader, OAuth2PasswordBearer
from sqlalchemy.orm import Session

from norwedfilm.core.exceptions import AuthError
from norwedfilm.core.security import SESSION_COOKIE_NAME, decode_session_token
from norwedfilm.db.redis import redis_client
from norwedfilm.db.session import get_db
from norwedfilm.schemas.token import TokenPayload
from norwedfilm.services import api_keys
from norwedfilm.services.query_cache import QueryCache


def get_query_cache() -> QueryCache:
    return QueryCache(redis_client)


# The `tokenUrl` is only used for the OpenAPI documentation; sessions are
# issued by POST /api/auth/supabase/session.
oauth2_scheme_optional = OAuth2PasswordBearer(
    tokenUrl="auth/supabase/session", auto_error=False
)

# Define the header we expect the key to be in
api_key_header = APIKeyHeader(name="X-Api-Key", auto_error=False)


class ApiKeyPrincipal:
    """Identity of a request authenticated with the admin API key."""

    email = "api-key"
    sub = "api-key"


AdminPrincipal = Union[TokenPayload, ApiKeyPrincipal]


def get_session_user(
    request: Request,
    token: Optional[str] = Depends(oauth2_scheme_optional),
) -> TokenPayload:
    """
    The signed-in admin from the session JWT, sent as a bearer token or
    in the session cookie.
    """
    for candidate in (token, request.cookies.get(SESSION_COOKIE_NAME)):
        if candidate:
            payload = decode_session_token(candidate)
            if payload is not None:
                return payload
    raise AuthError("Unauthorized")


def get_api_key_admin(
    api_key: Optional[str] = Security(api_key_header),
    token: Optional[str] = Depends(oauth2_scheme_optional),
    db: Session = Depends(get_db),
) -> ApiKeyPrincipal:
    """
    Checks for and validates the admin API key, sent either in the
    X-Api-Key header or as a bearer token.
    """
    if api_keys.is_valid_api_key(db, api_key or token):
        return ApiKeyPrincipal()
    raise AuthError("Unauthorized")


def get_current_admin(
    request: Request,
    api_key: Optional[str] = Security(api_key_header),
    token: Optional[str] = Depends(oauth2_scheme_optional),
    db: Session = Depends(get_db),
) -> AdminPrincipal:
    """Admin routes accept the API key or a session."""
    if api_keys.is_valid_api_key(db, api_key or token):
        return ApiKeyPrincipal()
    return get_session_user(request, token)
