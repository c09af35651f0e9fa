"""
FastAPI dependency injection for database session, movie store and controller.
"""

from typing import Generator
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.api.config import get_database_path
from app.core.controller import MovieController
from app.database.connection import get_db_manager
from app.database.movie_model import MovieModel


def get_db() -> Generator[Session, None, None]:
    """Yield database session for FastAPI Depends()."""
    db_manager = get_db_manager(db_path=get_database_path())
    with db_manager.session_scope() as session:
        yield session


def get_movie_model(db: Session = Depends(get_db)) -> MovieModel:
    """Movie store bound to the request's session."""
    return MovieModel(db)


def get_movie_controller(movie_model: MovieModel = Depends(get_movie_model)) -> MovieController:
    """Build a fresh controller for each request."""
    return MovieController(movie_model)


async def get_request_body(request: Request) -> bytes:
    """Raw request body, read once."""
    return await request.body()
