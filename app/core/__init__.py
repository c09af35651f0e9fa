"""
Request-validation pipeline for movie records.

Sanitizes inbound JSON, validates each field, and shapes responses.
"""

from app.core.controller import MovieController
from app.core.exceptions import (
    FieldValidationError,
    MalformedInputError,
    MovieApiError,
    ResourceConflictError,
    ResourceNotFoundError,
)
from app.core.resources import MovieStore, ResourceChecker
from app.core.responses import error_response, success_response
from app.core.sanitizer import sanitize
from app.core.validator import FieldValidator

__all__ = [
    "MovieController",
    "MovieStore",
    "ResourceChecker",
    "FieldValidator",
    "sanitize",
    "error_response",
    "success_response",
    "MovieApiError",
    "MalformedInputError",
    "FieldValidationError",
    "ResourceNotFoundError",
    "ResourceConflictError",
]
