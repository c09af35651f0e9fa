"""
Error taxonomy for the movie API.

Every error carries the pieces of its error envelope so the API layer can
render it without knowing the concrete type.
"""

from typing import Any


class MovieApiError(Exception):
    """Base class for errors surfaced to API clients."""

    kind = "Internal Server Error"
    status_code = 500
    default_message = "Unexpected error"

    def __init__(self, message: str | None = None, data: Any = None):
        self.message = message or self.default_message
        self.data = data
        super().__init__(self.message)


class MalformedInputError(MovieApiError):
    """Request body is not valid JSON or not a JSON object."""

    kind = "Bad Request"
    status_code = 400
    default_message = "Request body must be a JSON object"


class FieldValidationError(MovieApiError):
    """One or more fields failed validation; `errors` maps field to message."""

    kind = "Unprocessable Entity"
    status_code = 422
    default_message = "Invalid Entries"

    def __init__(self, errors: dict[str, str], message: str | None = None):
        self.errors = dict(errors)
        super().__init__(message, data=self.errors)


class ResourceNotFoundError(MovieApiError):
    """No movie record matches the identifier."""

    kind = "Not Found"
    status_code = 404
    default_message = "Movie not found"

    def __init__(self, identifier: str, message: str | None = None):
        self.identifier = identifier
        super().__init__(message, data={"uid": identifier})


class ResourceConflictError(MovieApiError):
    """A movie record with the identifier already exists."""

    kind = "Conflict"
    status_code = 409
    default_message = "Movie already exists"

    def __init__(self, identifier: str, message: str | None = None):
        self.identifier = identifier
        super().__init__(message, data={"uid": identifier})
