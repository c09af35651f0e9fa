"""
Movie resource controller.

Ties the validation pipeline, the existence checks and the movie store
together. Every operation returns a success envelope or raises a
MovieApiError that the API layer renders as an error envelope.
"""

import logging

from app.core.exceptions import FieldValidationError, ResourceConflictError
from app.core.resources import MovieStore, ResourceChecker
from app.core.responses import SuccessEnvelope, success_response
from app.core.sanitizer import escape
from app.core.validator import FieldValidator

logger = logging.getLogger(__name__)


class MovieController:
    """
    CRUD operations on movie records.

    Args:
        movie_model: Store used for lookups and writes (required)
        validator: Field validator (default: the movie rule table)
    """

    def __init__(self, movie_model: MovieStore, validator: FieldValidator | None = None):
        self.movie_model = movie_model
        self.validator = validator or FieldValidator()
        self.checker = ResourceChecker(movie_model)

    def list_movies(self) -> SuccessEnvelope:
        movies = self.movie_model.all()
        return success_response("OK", "Movies retrieved", movies)

    def get_movie(self, uid: str) -> SuccessEnvelope:
        self.checker.require(uid)
        return success_response("OK", "Movie retrieved", self.movie_model.get(escape(uid)))

    def create_movie(self, raw_body: bytes) -> SuccessEnvelope:
        """Validate a request body and insert it as a new movie."""
        record = self._validated(raw_body)
        if self.checker.exists(record["uid"]):
            logger.info("Rejected duplicate movie uid %s", record["uid"])
            raise ResourceConflictError(record["uid"])
        created = self.movie_model.insert(record)
        logger.info("Created movie %s", created["uid"])
        return success_response("Created", "Movie created", created)

    def update_movie(self, uid: str, raw_body: bytes) -> SuccessEnvelope:
        """Replace an existing movie with a validated request body."""
        self.checker.require(uid)
        record = self._validated(raw_body)
        if record["uid"] != escape(uid):
            raise FieldValidationError(
                {"uid": "Movie unique id does not match the requested resource"}
            )
        updated = self.movie_model.update(record["uid"], record)
        logger.info("Updated movie %s", record["uid"])
        return success_response("OK", "Movie updated", updated)

    def delete_movie(self, uid: str) -> SuccessEnvelope:
        self.checker.require(uid)
        self.movie_model.delete(escape(uid))
        logger.info("Deleted movie %s", escape(uid))
        return success_response("OK", "Movie deleted", {"uid": uid})

    def _validated(self, raw_body: bytes) -> dict:
        try:
            return self.validator.validate_body(raw_body)
        except FieldValidationError as e:
            logger.info("Rejected movie payload: %s", sorted(e.errors))
            raise
