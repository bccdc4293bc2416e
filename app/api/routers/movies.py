"""
Movie API endpoints.
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from app.api.dependencies import get_db
from app.api.models.movie import MovieDetails, MovieQuery, MovieSummary, MessageResponse
from app.core.presentation import present_details, present_summary
from app.database import crud
from app.database.connection import DatabaseManager

router = APIRouter(prefix="/api/movies", tags=["movies"])

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 50


def _paging(query: MovieQuery) -> tuple[int, int]:
    return query.page or DEFAULT_PAGE, query.pageSize or DEFAULT_PAGE_SIZE


@router.get("", response_model=List[MovieSummary])
@router.get("/", response_model=List[MovieSummary], include_in_schema=False)
async def list_movies(
    query: Annotated[MovieQuery, Query()],
    db: DatabaseManager = Depends(get_db),
):
    """List all movies (paginated)."""
    page, page_size = _paging(query)
    movies = await crud.list_movies(db, page=page, page_size=page_size)
    return [present_summary(m) for m in movies]


@router.get("/year/{year}", response_model=List[MovieSummary])
async def list_movies_by_year(
    year: str,
    query: Annotated[MovieQuery, Query()],
    db: DatabaseManager = Depends(get_db),
):
    """List movies released in a year, ordered by release date (asc|desc)."""
    page, page_size = _paging(query)
    movies = await crud.list_movies_by_year(
        db, year, page=page, sort=query.sort or "asc", page_size=page_size
    )
    return [present_summary(m) for m in movies]


@router.get("/genre/{genre}", response_model=List[MovieSummary])
async def list_movies_by_genre(
    genre: str,
    query: Annotated[MovieQuery, Query()],
    db: DatabaseManager = Depends(get_db),
):
    """List movies whose genres contain the given text (paginated)."""
    page, page_size = _paging(query)
    movies = await crud.list_movies_by_genre(db, genre, page=page, page_size=page_size)
    return [present_summary(m) for m in movies]


@router.get(
    "/{imdb_id}",
    response_model=MovieDetails,
    responses={404: {"model": MessageResponse}},
)
async def get_movie(imdb_id: str, db: DatabaseManager = Depends(get_db)):
    """Get movie details, with average rating, by IMDb id."""
    details = await crud.get_movie_details(db, imdb_id)
    if details is None:
        return JSONResponse(status_code=404, content={"message": "Movie not found"})
    return present_details(details)
