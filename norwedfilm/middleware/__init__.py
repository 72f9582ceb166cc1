"""Middleware module"""

from norwedfilm.middleware.error_handler import (
    app_error_handler,
    database_error_handler,
    validation_error_handler,
)

__all__ = [
    "app_error_handler",
    "database_error_handler",
    "validation_error_handler",
]
