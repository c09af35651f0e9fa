"""
FastAPI application entry point for the Movie Records API.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.config import get_api_host, get_api_port, get_log_file, get_log_level
from app.api.routers import movies, system
from app.core.exceptions import MovieApiError
from app.core.responses import error_response
from app.utils.logging_config import setup_logging

setup_logging(log_file=get_log_file(), level=get_log_level())
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Movie Records API",
    description="REST API for validated movie records",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(movies.router)
app.include_router(system.router)


@app.exception_handler(MovieApiError)
async def movie_api_error_handler(request: Request, exc: MovieApiError) -> JSONResponse:
    """Render any MovieApiError as an error envelope."""
    logger.info("%s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.kind)
    envelope = error_response(exc.kind, exc.message, exc.data)
    return JSONResponse(status_code=exc.status_code, content=envelope.model_dump())


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "message": "Movie Records API",
        "docs": "/docs",
        "health": "/api/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=get_api_host(), port=get_api_port())
