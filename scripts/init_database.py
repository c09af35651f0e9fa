#!/usr/bin/env python
"""
Database initialization script for movie records.

Creates the movie_details table and optionally imports movies from a JSON
file (a list of movie objects). Every imported movie goes through the same
sanitize/validate pipeline as the API; rejected entries are reported and
skipped.

Usage:
    python scripts/init_database.py --reset
    python scripts/init_database.py --import-file data/movies.json
"""

import sys
import json
import argparse
import logging
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.core.sanitizer import sanitize_mapping
from app.core.validator import FieldValidator
from app.database import MovieModel, init_database, verify_schema
from app.database.connection import DEFAULT_DB_PATH
from app.utils.logging_config import setup_logging

logger = logging.getLogger("init_database")


def import_movies(db_manager, path: Path) -> tuple[int, int]:
    """
    Import movies from a JSON file.
    
    Returns:
        (imported, rejected) counts
    """
    entries = json.loads(path.read_text(encoding="utf-8"))
    validator = FieldValidator()
    imported = rejected = 0
    
    with db_manager.session_scope() as session:
        movie_model = MovieModel(session)
        for position, entry in enumerate(entries):
            if not isinstance(entry, dict):
                logger.warning("Entry %d is not an object, skipped", position)
                rejected += 1
                continue
            record, errors = validator.validate(sanitize_mapping(entry))
            if errors:
                logger.warning("Entry %d rejected: %s", position, errors)
                rejected += 1
                continue
            if movie_model.lookup("movie_details", {"uid": "uid"}, record["uid"]):
                logger.warning("Entry %d skipped: %s already exists", position, record["uid"])
                rejected += 1
                continue
            movie_model.insert(record)
            imported += 1
    
    return imported, rejected


def main():
    parser = argparse.ArgumentParser(
        description="Initialize the movie records database",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        '--reset',
        action='store_true',
        help='Drop existing tables before creating them'
    )
    parser.add_argument(
        '--db-path',
        type=str,
        default=DEFAULT_DB_PATH,
        help=f'SQLite database path (default: {DEFAULT_DB_PATH})'
    )
    parser.add_argument(
        '--import-file',
        type=str,
        default=None,
        help='JSON file holding a list of movies to import'
    )
    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Only log warnings and errors'
    )
    args = parser.parse_args()
    
    setup_logging(level="WARNING" if args.quiet else "INFO")
    
    db_manager = init_database(db_path=args.db_path, reset=args.reset)
    if not verify_schema(db_manager):
        sys.exit(1)
    
    if args.import_file:
        imported, rejected = import_movies(db_manager, Path(args.import_file))
        logger.info("Imported %d movies, rejected %d", imported, rejected)


if __name__ == "__main__":
    main()
