"""
System API endpoints (health).
"""

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError

from app.api.dependencies import get_movie_model
from app.database.movie_model import MovieModel

router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health")
def health_check(movie_model: MovieModel = Depends(get_movie_model)):
    """Health check: database reachable and movie count."""
    try:
        movie_count = movie_model.count()
    except SQLAlchemyError as e:
        return {"status": "unhealthy", "database": str(e)}
    return {
        "status": "healthy",
        "database": "connected",
        "movies": movie_count,
    }
