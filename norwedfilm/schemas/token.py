# norwedfilm/schemas/token.py
from typing import Optional

from pydantic import Field

from norwedfilm.schemas.base import CamelModel


class SessionUser(CamelModel):
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None


class TokenPayload(SessionUser):
    sub: str  # "sub" is the standard claim for subject (user ID)
    exp: int  # Standard claim for expiration time


class SupabaseSessionRequest(CamelModel):
    access_token: str = Field(..., min_length=1)


class SessionResponse(CamelModel):
    token: str
    token_type: str = "bearer"
    user: SessionUser


class ApiKeyStatus(CamelModel):
    enabled: bool
    source: str  # database, environment or none
    rotated_at: Optional[str] = None
    rotated_by: Optional[str] = None
    rotated_ip: Optional[str] = None


class ApiKeyRotateRequest(CamelModel):
    # Leave empty to have the server generate a key.
    api_key: Optional[str] = None


class ApiKeyRotated(CamelModel):
    success: bool = True
    api_key: str
    rotated_at: str
    rotated_by: str
    rotated_ip: str
