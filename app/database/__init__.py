"""
Database module for the movie catalog API.

This module provides the table declarations, the async connection manager
and the read queries for the movies and ratings SQLite databases.
"""

from app.database.models import Base, RatingsBase, Movie, Rating, RATINGS_SCHEMA
from app.database.connection import DatabaseManager, StartupResult
from app.database import crud

__all__ = [
    # Models
    'Base',
    'RatingsBase',
    'Movie',
    'Rating',
    'RATINGS_SCHEMA',
    # Connection
    'DatabaseManager',
    'StartupResult',
    # Query module
    'crud',
]
