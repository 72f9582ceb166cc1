# norwedfilm/core/security.py
"""
Signed admin session tokens.

After the identity provider vouches for an allow-listed e-mail address the
service issues its own HS256 JWT; it is sent back as a cookie and in the
response body, and accepted as a bearer token or cookie afterwards.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt

from norwedfilm.core.config import settings
from norwedfilm.schemas.token import SessionUser, TokenPayload

ALGORITHM = "HS256"
SESSION_COOKIE_NAME = "nf_session"


def create_session_token(
    user_id: str, user: SessionUser, expires_delta: Optional[timedelta] = None
) -> str:
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(seconds=settings.SESSION_MAX_AGE_SECONDS)
    )
    payload = {
        "sub": user_id,
        "exp": int(expire.timestamp()),
        **user.model_dump(by_alias=True),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=ALGORITHM)


def decode_session_token(token: str) -> Optional[TokenPayload]:
    """The token's claims, or None when it is malformed, forged or expired."""
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[ALGORITHM])
        return TokenPayload(**payload)
    except (JWTError, ValueError):
        return None
