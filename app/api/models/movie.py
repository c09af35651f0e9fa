"""
Pydantic schemas for Movie API responses.
"""

from pydantic import BaseModel


class MovieResponse(BaseModel):
    """A stored movie record."""

    uid: str
    title: str
    year: int
    released: str
    runtime: str  # e.g. "155 mins"
    directors: str
    actors: str
    country: str
    poster: str
    imdb: str  # e.g. "8/10"
    type: str


class MovieEnvelope(BaseModel):
    """Success envelope carrying one movie."""

    success: str
    message: str
    data: MovieResponse


class MovieListEnvelope(BaseModel):
    """Success envelope carrying every movie."""

    success: str
    message: str
    data: list[MovieResponse]


class DeletedEnvelope(BaseModel):
    """Success envelope for a deleted movie."""

    success: str
    message: str
    data: dict[str, str]


class ErrorEnvelopeSchema(BaseModel):
    """Error envelope; data maps field names to messages on validation errors."""

    error: str
    message: str
    data: dict[str, str] | None = None
