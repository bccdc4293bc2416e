"""
Read operations for the movie catalog.

Every query is composed with SQLAlchemy Core, so all values (ids, years,
genres, limits, offsets) are sent as bound parameters. Rows come back as
plain dicts keyed by the column labels the API exposes.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import String, func, literal, select

from app.database.connection import DatabaseManager
from app.database.models import Movie, Rating

logger = logging.getLogger(__name__)


DEFAULT_PAGE_SIZE = 50


def _offset(page: int, page_size: int) -> int:
    """Row offset for a 1-indexed page."""
    return (page - 1) * page_size


def _formatted_budget():
    """Budget rendered by SQLite as '$1,000,000'."""
    return (literal("$", String) + func.printf("%,d", Movie.budget, type_=String)).label("budget")


def _summary_select():
    """Base SELECT for the list endpoints."""
    return select(
        Movie.imdb_id.label("imdbId"),
        Movie.title,
        Movie.genres,
        Movie.release_date.label("releaseDate"),
        _formatted_budget(),
    )


async def _fetch_all(db: DatabaseManager, stmt) -> List[Dict[str, Any]]:
    async with db.connect() as conn:
        result = await conn.execute(stmt)
        return [dict(row) for row in result.mappings().all()]


# ==================== LIST OPERATIONS ====================

async def list_movies(
    db: DatabaseManager,
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> List[Dict[str, Any]]:
    """
    Get a page of movies in storage order.

    Args:
        db: Database manager
        page: Page number (1-indexed)
        page_size: Number of movies per page

    Returns:
        List of summary rows (imdbId, title, genres, releaseDate, budget)
    """
    logger.debug("list_movies page=%s page_size=%s", page, page_size)
    stmt = _summary_select().limit(page_size).offset(_offset(page, page_size))
    return await _fetch_all(db, stmt)


async def list_movies_by_year(
    db: DatabaseManager,
    year: str,
    page: int = 1,
    sort: Optional[str] = "asc",
    page_size: int = DEFAULT_PAGE_SIZE,
) -> List[Dict[str, Any]]:
    """
    Get a page of movies released in a given year, ordered by release date.

    Args:
        db: Database manager
        year: Four-digit release year, compared against strftime('%Y', releaseDate)
        page: Page number (1-indexed)
        sort: 'desc' (any case) for newest first; anything else sorts ascending
        page_size: Number of movies per page

    Returns:
        List of summary rows
    """
    descending = isinstance(sort, str) and sort.lower() == "desc"
    order = Movie.release_date.desc() if descending else Movie.release_date.asc()
    logger.debug(
        "list_movies_by_year year=%s page=%s sort=%s page_size=%s",
        year, page, "desc" if descending else "asc", page_size,
    )
    stmt = (
        _summary_select()
        .where(func.strftime("%Y", Movie.release_date) == str(year))
        .order_by(order)
        .limit(page_size)
        .offset(_offset(page, page_size))
    )
    return await _fetch_all(db, stmt)


async def list_movies_by_genre(
    db: DatabaseManager,
    genre: str,
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> List[Dict[str, Any]]:
    """
    Get a page of movies whose genre text contains ``genre``.

    This is a raw, case-sensitive substring test on the stored JSON text,
    not a membership test: 'Dram' matches '["Drama"]'.

    Args:
        db: Database manager
        genre: Substring to look for
        page: Page number (1-indexed)
        page_size: Number of movies per page

    Returns:
        List of summary rows
    """
    logger.debug("list_movies_by_genre genre=%s page=%s page_size=%s", genre, page, page_size)
    stmt = (
        _summary_select()
        .where(func.instr(Movie.genres, genre) > 0)
        .limit(page_size)
        .offset(_offset(page, page_size))
    )
    return await _fetch_all(db, stmt)


# ==================== DETAIL OPERATIONS ====================

async def get_movie_details(db: DatabaseManager, imdb_id: str) -> Optional[Dict[str, Any]]:
    """
    Get full details for a movie, including its average rating.

    Attaches the ratings database first if needed. The average is a
    correlated subquery over ratingsDb.ratings keyed on movieId.

    Args:
        db: Database manager
        imdb_id: IMDb identifier

    Returns:
        Detail row, or None if no movie has this IMDb id
    """
    await db.attach_ratings()

    average_rating = (
        select(func.avg(Rating.rating))
        .where(Rating.movie_id == Movie.movie_id)
        .scalar_subquery()
        .label("average_rating")
    )
    stmt = select(
        Movie.imdb_id.label("imdb_id"),
        Movie.title,
        Movie.overview.label("description"),
        Movie.release_date.label("release_date"),
        _formatted_budget(),
        Movie.runtime,
        Movie.genres,
        Movie.language.label("original_language"),
        Movie.production_companies.label("production_companies"),
        average_rating,
    ).where(Movie.imdb_id == imdb_id)

    logger.debug("get_movie_details imdb_id=%s", imdb_id)
    async with db.connect() as conn:
        result = await conn.execute(stmt)
        row = result.mappings().first()
    return dict(row) if row is not None else None


async def get_movie_count(db: DatabaseManager) -> int:
    """
    Get total count of movies.

    Args:
        db: Database manager

    Returns:
        Total number of movies
    """
    async with db.connect() as conn:
        result = await conn.execute(select(func.count(Movie.movie_id)))
        return result.scalar_one()
