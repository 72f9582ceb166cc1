from norwedfilm.core.config import settings
from norwedfilm.core.security import create_session_token
from norwedfilm.schemas.token import SessionUser


def get_session_headers(email: str = "admin@norwedfilm.no") -> dict[str, str]:
    """
    Signs a session token for an admin and returns bearer headers.
    """
    token = create_session_token("user_test", SessionUser(email=email, first_name="Nora"))
    return {"Authorization": f"Bearer {token}"}


def get_api_key_headers() -> dict[str, str]:
    return {"X-Api-Key": settings.ADMIN_API_KEY}
