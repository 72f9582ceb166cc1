# norwedfilm/utils/security.py
"""
Input hardening helpers shared by the endpoints.
"""

DEFAULT_NEXT_PATH = "/admin"


def safe_next_path(raw_path: str | None) -> str:
    """
    Post-login redirect target. Only same-site absolute paths are allowed;
    "//host" would be read by browsers as another origin.
    """
    if not raw_path:
        return DEFAULT_NEXT_PATH
    if not raw_path.startswith("/") or raw_path.startswith("//"):
        return DEFAULT_NEXT_PATH
    return raw_path


def clamp_limit(limit: int | None, default: int, maximum: int) -> int:
    """
    Normalizes a page size. Missing or non-positive values fall back to the
    default; large ones are capped.
    """
    if not limit or limit < 1:
        return default
    return min(limit, maximum)


def clamp_page(page: int | None) -> int:
    if not page or page < 1:
        return 1
    return page
