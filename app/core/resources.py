"""
Existence checks against the movie store.
"""

from typing import Any, Mapping, Optional, Protocol

from app.core.exceptions import ResourceNotFoundError
from app.core.sanitizer import escape

MOVIE_COLLECTION = "movie_details"
UID_KEY = {"uid": "uid"}


class MovieStore(Protocol):
    """Data-access operations the API layer relies on."""

    def lookup(self, collection_name: str, key_field: Mapping[str, str], value: str) -> bool: ...

    def get(self, uid: str) -> Optional[dict[str, Any]]: ...

    def all(self) -> list[dict[str, Any]]: ...

    def insert(self, record: Mapping[str, Any]) -> dict[str, Any]: ...

    def update(self, uid: str, record: Mapping[str, Any]) -> Optional[dict[str, Any]]: ...

    def delete(self, uid: str) -> bool: ...


class ResourceChecker:
    """Answers whether a movie uid is present in the store."""

    def __init__(self, movie_model: MovieStore):
        self.movie_model = movie_model

    def exists(self, identifier: str) -> bool:
        return self.movie_model.lookup(MOVIE_COLLECTION, UID_KEY, escape(identifier))

    def require(self, identifier: str) -> None:
        """Raise ResourceNotFoundError unless the uid exists."""
        if not self.exists(identifier):
            raise ResourceNotFoundError(identifier)
