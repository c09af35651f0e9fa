"""
SQLAlchemy ORM model for stored movie records.

Column values are stored exactly as the validation pipeline normalizes them
(escaped strings, integer year, runtime with " mins", imdb with "/10").
"""

from datetime import datetime
from typing import Any
from sqlalchemy import Integer, String, Text, TIMESTAMP, Index
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql import func


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


class MovieRecord(Base):
    """
    Movie details table.
    
    Attributes:
        uid: Primary key, "mv" followed by 3-4 digits
        title: Movie title
        year: Release year
        released: Release date as supplied
        runtime: Runtime, e.g. "155 mins"
        directors: Director name(s)
        actors: Actor name(s)
        country: Country of origin
        poster: Poster reference (always blank)
        imdb: Rating, e.g. "8/10"
        type: Record type, e.g. "movie"
        created_at: Timestamp when record was created
        updated_at: Timestamp when record was last updated
    """
    __tablename__ = 'movie_details'
    
    uid: Mapped[str] = mapped_column(String(6), primary_key=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    released: Mapped[str] = mapped_column(String(64), nullable=False)
    runtime: Mapped[str] = mapped_column(String(64), nullable=False)
    directors: Mapped[str] = mapped_column(Text, nullable=False)
    actors: Mapped[str] = mapped_column(Text, nullable=False)
    country: Mapped[str] = mapped_column(Text, nullable=False)
    poster: Mapped[str] = mapped_column(Text, nullable=False, default="")
    imdb: Mapped[str] = mapped_column(String(32), nullable=False)
    type: Mapped[str] = mapped_column(String(32), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP,
        nullable=False,
        server_default=func.current_timestamp()
    )
    updated_at: Mapped[datetime] = mapped_column(
        TIMESTAMP,
        nullable=False,
        server_default=func.current_timestamp(),
        onupdate=func.current_timestamp()
    )
    
    __table_args__ = (
        Index('idx_movie_details_title', 'title'),
        Index('idx_movie_details_year', 'year'),
    )
    
    RECORD_FIELDS = (
        'uid', 'title', 'year', 'released', 'runtime', 'directors',
        'actors', 'country', 'poster', 'imdb', 'type',
    )
    
    def to_dict(self) -> dict[str, Any]:
        """Return the record fields as a plain mapping."""
        return {field: getattr(self, field) for field in self.RECORD_FIELDS}
    
    def __repr__(self) -> str:
        return f"<MovieRecord(uid='{self.uid}', title='{self.title}', year={self.year})>"
