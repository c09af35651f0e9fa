"""
Movie API endpoints.
"""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_movie_controller, get_request_body
from app.api.models.movie import (
    DeletedEnvelope,
    ErrorEnvelopeSchema,
    MovieEnvelope,
    MovieListEnvelope,
)
from app.core.controller import MovieController

router = APIRouter(prefix="/api/movies", tags=["movies"])

NOT_FOUND = {404: {"model": ErrorEnvelopeSchema}}
INVALID_BODY = {
    400: {"model": ErrorEnvelopeSchema},
    422: {"model": ErrorEnvelopeSchema},
}


@router.get("", response_model=MovieListEnvelope)
def list_movies(controller: MovieController = Depends(get_movie_controller)):
    """List every movie."""
    return controller.list_movies()


@router.get("/{uid}", response_model=MovieEnvelope, responses=NOT_FOUND)
def get_movie(uid: str, controller: MovieController = Depends(get_movie_controller)):
    """Get movie details by uid."""
    return controller.get_movie(uid)


@router.post(
    "",
    response_model=MovieEnvelope,
    status_code=201,
    responses={**INVALID_BODY, 409: {"model": ErrorEnvelopeSchema}},
)
def create_movie(
    body: bytes = Depends(get_request_body),
    controller: MovieController = Depends(get_movie_controller),
):
    """Validate the JSON body and store it as a new movie."""
    return controller.create_movie(body)


@router.put("/{uid}", response_model=MovieEnvelope, responses={**INVALID_BODY, **NOT_FOUND})
def update_movie(
    uid: str,
    body: bytes = Depends(get_request_body),
    controller: MovieController = Depends(get_movie_controller),
):
    """Replace an existing movie with the validated JSON body."""
    return controller.update_movie(uid, body)


@router.delete("/{uid}", response_model=DeletedEnvelope, responses=NOT_FOUND)
def delete_movie(uid: str, controller: MovieController = Depends(get_movie_controller)):
    """Delete a movie by uid."""
    return controller.delete_movie(uid)
