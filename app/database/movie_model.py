"""
Data access for movie records.

MovieModel wraps a SQLAlchemy session and implements the store interface
used by the controller and the existence checks.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.database.models import Base, MovieRecord

logger = logging.getLogger(__name__)


class MovieModel:
    """
    Movie store backed by a database session.
    
    Args:
        session: Database session; the caller owns its lifecycle
    """
    
    def __init__(self, session: Session):
        self.session = session
    
    def _table_model(self, collection_name: str) -> type[Base]:
        if collection_name != MovieRecord.__tablename__:
            raise ValueError(f"Unknown collection: {collection_name}")
        return MovieRecord
    
    def lookup(self, collection_name: str, key_field: Mapping[str, str], value: str) -> bool:
        """
        Check whether a record exists.
        
        Args:
            collection_name: Table to search (only "movie_details")
            key_field: Mapping of logical key name to column name
            value: Value the column must equal
            
        Returns:
            True if at least one record matches
            
        Raises:
            ValueError: If the collection or column is unknown
        """
        model = self._table_model(collection_name)
        columns = model.__table__.columns
        conditions = []
        for column_name in key_field.values():
            if column_name not in columns:
                raise ValueError(f"Unknown column: {column_name}")
            conditions.append(columns[column_name] == value)
        
        statement = select(func.count()).select_from(model).where(*conditions)
        return self.session.execute(statement).scalar() > 0
    
    def get(self, uid: str) -> Optional[Dict[str, Any]]:
        """
        Get a movie by uid.
        
        Returns:
            Record mapping or None if not found
        """
        movie = self.session.get(MovieRecord, uid)
        return movie.to_dict() if movie else None
    
    def all(self) -> List[Dict[str, Any]]:
        """Get every movie ordered by uid."""
        movies = self.session.scalars(select(MovieRecord).order_by(MovieRecord.uid))
        return [movie.to_dict() for movie in movies]
    
    def count(self) -> int:
        """Get total count of movies."""
        return self.session.execute(select(func.count(MovieRecord.uid))).scalar()
    
    def insert(self, record: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Insert a validated movie record.
        
        Args:
            record: Mapping holding every movie field
            
        Returns:
            The stored record
        """
        movie = MovieRecord(**{field: record[field] for field in MovieRecord.RECORD_FIELDS})
        self.session.add(movie)
        self.session.commit()
        self.session.refresh(movie)
        logger.debug("Inserted %r", movie)
        return movie.to_dict()
    
    def update(self, uid: str, record: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Overwrite the fields of an existing movie.
        
        Returns:
            The stored record, or None if the uid is unknown
        """
        movie = self.session.get(MovieRecord, uid)
        if movie is None:
            return None
        for field in MovieRecord.RECORD_FIELDS:
            if field != 'uid' and field in record:
                setattr(movie, field, record[field])
        self.session.commit()
        self.session.refresh(movie)
        logger.debug("Updated %r", movie)
        return movie.to_dict()
    
    def delete(self, uid: str) -> bool:
        """
        Delete a movie.
        
        Returns:
            True if the movie was deleted, False if not found
        """
        movie = self.session.get(MovieRecord, uid)
        if movie is None:
            return False
        self.session.delete(movie)
        self.session.commit()
        logger.debug("Deleted movie %s", uid)
        return True
