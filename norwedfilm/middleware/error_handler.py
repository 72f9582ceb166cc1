"""
Exception handlers registered on the app in ``norwedfilm.main``.

Every failure leaves the service in the same envelope:

    {"error": {"category": ..., "message": ..., "timestamp": ..., "path": ...}}

Domain errors add their details (``field``, ``resource``, ``id``...) next to
the message; request validation failures add a per-field ``errors`` list.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import OperationalError, SQLAlchemyError

from norwedfilm.core.exceptions import AppError, ErrorCategory

logger = logging.getLogger(__name__)

DATABASE_RETRY_AFTER_SECONDS = 30


def error_response(
    request: Request,
    *,
    status_code: int,
    category: str,
    message: str,
    headers: Optional[Dict[str, str]] = None,
    **extra: Any,
) -> JSONResponse:
    body = {
        "category": category,
        "message": message,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "path": request.url.path,
        **extra,
    }
    return JSONResponse(status_code=status_code, content={"error": body}, headers=headers)


def _field_errors(exc: RequestValidationError) -> List[Dict[str, str]]:
    # "body" is noise in the location of a JSON body field.
    return [
        {
            "field": ".".join(str(part) for part in err["loc"] if part != "body"),
            "message": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors()
    ]


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    level = logging.WARNING if exc.status_code < 500 else logging.ERROR
    logger.log(
        level,
        f"{request.method} {request.url.path} failed with {exc.status_code}: {exc.message}",
        extra={"category": exc.category},
    )
    return error_response(
        request,
        status_code=exc.status_code,
        category=exc.category,
        message=exc.message,
        **exc.details,
    )


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = _field_errors(exc)
    logger.warning(
        f"{request.method} {request.url.path} rejected: "
        + ", ".join(e["field"] or e["type"] for e in errors)
    )
    return error_response(
        request,
        status_code=400,
        category=ErrorCategory.VALIDATION,
        message="Invalid data",
        errors=errors,
    )


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Unreachable database is 503 with Retry-After; anything else is 500."""
    unavailable = isinstance(exc, OperationalError)
    logger.error(
        f"{request.method} {request.url.path} hit {type(exc).__name__}",
        exc_info=True,
    )
    return error_response(
        request,
        status_code=503 if unavailable else 500,
        category=ErrorCategory.DATABASE,
        message="Database operation failed. Please try again.",
        headers={"Retry-After": str(DATABASE_RETRY_AFTER_SECONDS)} if unavailable else None,
        type=type(exc).__name__,
    )
