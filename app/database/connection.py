"""
Database connection management using SQLAlchemy.

This module handles SQLite engine creation and session management.
"""

import os
from contextlib import contextmanager
from typing import Generator
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from app.database.models import Base


# Default database path
DEFAULT_DB_PATH = "data/movies.db"
MEMORY_DB_PATH = ":memory:"


def get_database_url(db_path: str = DEFAULT_DB_PATH) -> str:
    """
    Get SQLite database URL.
    
    Args:
        db_path: Path to SQLite database file, or ":memory:"
        
    Returns:
        SQLAlchemy database URL
    """
    if db_path == MEMORY_DB_PATH:
        return "sqlite://"
    
    db_dir = os.path.dirname(db_path)
    if db_dir:
        os.makedirs(db_dir, exist_ok=True)
    
    return f"sqlite:///{os.path.abspath(db_path)}"


class DatabaseManager:
    """
    Database connection manager.
    
    Handles engine creation, session management, and table creation.
    """
    
    def __init__(self, db_path: str = DEFAULT_DB_PATH, echo: bool = False):
        """
        Initialize database manager.
        
        Args:
            db_path: Path to SQLite database file
            echo: If True, log all SQL statements
        """
        self.db_path = db_path
        self.database_url = get_database_url(db_path)
        
        # StaticPool keeps a single connection, which in-memory databases need
        self.engine = create_engine(
            self.database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool
        )
        
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )
    
    def create_tables(self):
        """Create the tables that don't exist yet."""
        Base.metadata.create_all(bind=self.engine)
    
    def drop_tables(self):
        """
        Drop all tables.
        
        WARNING: This will delete all data in the database!
        """
        Base.metadata.drop_all(bind=self.engine)
    
    def reset_database(self):
        """Drop and recreate all tables."""
        self.drop_tables()
        self.create_tables()
    
    @contextmanager
    def session_scope(self) -> Generator[Session, None, None]:
        """
        Context manager for database sessions.
        
        Automatically commits on success and rolls back on failure.
        
        Yields:
            SQLAlchemy Session object
        """
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
    
    def close(self):
        """Close the database engine and all connections."""
        self.engine.dispose()


# Global database manager instance (singleton pattern)
_db_manager = None


def get_db_manager(db_path: str = DEFAULT_DB_PATH, echo: bool = False) -> DatabaseManager:
    """
    Get or create the global database manager instance.
    
    The movie table is created on first use.
    """
    global _db_manager
    if _db_manager is None:
        _db_manager = DatabaseManager(db_path=db_path, echo=echo)
        _db_manager.create_tables()
    return _db_manager

