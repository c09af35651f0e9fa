"""
Pydantic schemas for API responses.
"""

from app.api.models.movie import (
    MovieResponse,
    MovieEnvelope,
    MovieListEnvelope,
    DeletedEnvelope,
    ErrorEnvelopeSchema,
)

__all__ = [
    "MovieResponse",
    "MovieEnvelope",
    "MovieListEnvelope",
    "DeletedEnvelope",
    "ErrorEnvelopeSchema",
]
