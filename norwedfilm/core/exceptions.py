# norwedfilm/core/exceptions.py
"""
Domain errors raised by the CRUD and service layers.

Each error carries the HTTP status it maps to; the handlers in
``norwedfilm.middleware.error_handler`` turn them into JSON responses.
"""

from typing import Optional


class ErrorCategory:
    """Error categories for structured error handling"""
    VALIDATION = "validation_error"
    AUTHENTICATION = "authentication_error"
    AUTHORIZATION = "authorization_error"
    NOT_FOUND = "not_found_error"
    CONFLICT = "conflict_error"
    GONE = "gone_error"
    DATABASE = "database_error"
    EXTERNAL_SERVICE = "external_service_error"
    INTERNAL = "internal_error"


class AppError(Exception):
    """Base application error with structured information"""

    def __init__(
        self,
        message: str,
        category: str = ErrorCategory.INTERNAL,
        status_code: int = 500,
        details: Optional[dict] = None,
    ):
        self.message = message
        self.category = category
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(AppError):
    """A required field is missing or a value is outside its allowed set."""
    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(
            message=message,
            category=ErrorCategory.VALIDATION,
            status_code=400,
            details=details,
        )


class AuthError(AppError):
    def __init__(self, message: str = "Unauthorized"):
        super().__init__(
            message=message,
            category=ErrorCategory.AUTHENTICATION,
            status_code=401,
        )


class NotFoundError(AppError):
    def __init__(self, resource: str, identifier: Optional[str] = None):
        details = {"resource": resource}
        if identifier is not None:
            details["id"] = identifier
        super().__init__(
            message=f"{resource} not found",
            category=ErrorCategory.NOT_FOUND,
            status_code=404,
            details=details,
        )


class ConflictError(AppError):
    """Unique constraint violation (duplicate slug, email or key)."""
    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(
            message=message,
            category=ErrorCategory.CONFLICT,
            status_code=409,
            details=details,
        )


class StatusTransitionError(ValidationError):
    def __init__(self, resource: str, current: str, target: str):
        super().__init__(
            message=f"{resource} cannot move from '{current}' to '{target}'",
            field="status",
        )


class GalleryExpiredError(AppError):
    def __init__(self):
        super().__init__(
            message="Gallery has expired",
            category=ErrorCategory.GONE,
            status_code=410,
        )


class ExternalServiceError(AppError):
    """Errors talking to the identity provider."""
    def __init__(self, message: str, service: str, status_code: int = 502):
        super().__init__(
            message=message,
            category=ErrorCategory.EXTERNAL_SERVICE,
            status_code=status_code,
            details={"service": service},
        )


class ForbiddenError(AppError):
    """Authenticated identity is not on the admin allow-list."""
    def __init__(self, message: str = "Forbidden"):
        super().__init__(
            message=message,
            category=ErrorCategory.AUTHORIZATION,
            status_code=403,
        )
