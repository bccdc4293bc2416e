"""
FastAPI dependency injection for the database manager.
"""

from fastapi import Request

from app.database.connection import DatabaseManager


def get_db(request: Request) -> DatabaseManager:
    """Return the DatabaseManager opened by the application lifespan."""
    return request.app.state.db_manager
