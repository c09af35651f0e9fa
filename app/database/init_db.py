"""
Database initialization and schema verification.
"""

import logging

from sqlalchemy import inspect

from app.database.connection import DEFAULT_DB_PATH, DatabaseManager, get_db_manager
from app.database.models import MovieRecord

logger = logging.getLogger(__name__)


def init_database(db_path: str = DEFAULT_DB_PATH, reset: bool = False) -> DatabaseManager:
    """
    Initialize the database and create the movie table.
    
    Args:
        db_path: Path to SQLite database file
        reset: If True, drop existing tables before creating new ones
        
    Returns:
        DatabaseManager instance
    """
    db_manager = get_db_manager(db_path=db_path)
    
    if reset:
        logger.warning("Resetting database %s (dropping all tables)", db_manager.db_path)
        db_manager.reset_database()
    else:
        db_manager.create_tables()
    logger.info("Database tables ready at %s", db_manager.db_path)
    
    return db_manager


def verify_schema(db_manager: DatabaseManager) -> bool:
    """
    Verify that the movie table exists.
    
    Returns:
        True if the table exists, False otherwise
    """
    existing_tables = set(inspect(db_manager.engine).get_table_names())
    if MovieRecord.__tablename__ not in existing_tables:
        logger.error("Missing table: %s", MovieRecord.__tablename__)
        return False
    return True
