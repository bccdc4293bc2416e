"""
System API endpoints (health).
"""

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError

from app.api.dependencies import get_db
from app.database import crud
from app.database.connection import DatabaseManager

router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health")
async def health_check(db: DatabaseManager = Depends(get_db)):
    """Health check: database reachable and ratings attachment state."""
    try:
        movie_count = await crud.get_movie_count(db)
    except SQLAlchemyError as e:
        return {"status": "unhealthy", "database": str(e)}
    return {
        "status": "healthy",
        "database": "connected",
        "movies": movie_count,
        "ratings_attached": db.is_ratings_attached,
    }
