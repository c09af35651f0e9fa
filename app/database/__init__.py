"""
Database module for movie records.

This module provides the ORM model, connection management, and the
MovieModel data-access class using SQLAlchemy.
"""

from app.database.models import Base, MovieRecord
from app.database.connection import DatabaseManager, get_db_manager
from app.database.init_db import init_database, verify_schema
from app.database.movie_model import MovieModel

__all__ = [
    # Models
    'Base',
    'MovieRecord',
    # Connection
    'DatabaseManager',
    'get_db_manager',
    # Initialization
    'init_database',
    'verify_schema',
    # Data access
    'MovieModel',
]
