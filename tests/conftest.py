"""
Shared fixtures: small movies.db / ratings.db files built in a temp directory.
"""

import os

os.environ.setdefault("APP_ENV", "test")

import pytest
import pytest_asyncio
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from app.database.connection import DatabaseManager
from app.database.models import Base, Movie, Rating, RatingsBase, RATINGS_SCHEMA


MOVIES = [
    {
        "movie_id": 1, "imdb_id": "tt0111161", "title": "The Shawshank Redemption",
        "overview": "Two imprisoned men bond over a number of years.",
        "release_date": "1994-09-23", "runtime": 142, "budget": 25000000,
        "genres": '["Drama", "Crime"]', "language": "en",
        "production_companies": '["Castle Rock Entertainment"]',
    },
    {
        "movie_id": 2, "imdb_id": "tt0110912", "title": "Pulp Fiction",
        "overview": "The lives of two mob hitmen intertwine.",
        "release_date": "1994-10-14", "runtime": 154, "budget": 8000000,
        "genres": '["Thriller", "Crime"]', "language": "en",
        "production_companies": '["Miramax", "A Band Apart"]',
    },
    {
        "movie_id": 3, "imdb_id": "tt0109830", "title": "Forrest Gump",
        "overview": "A man with a low IQ has accomplished great things.",
        "release_date": "1994-07-06", "runtime": 142, "budget": 55000000,
        "genres": '["Comedy", "Drama", "Romance"]', "language": "en",
        "production_companies": '["Paramount Pictures"]',
    },
    {
        "movie_id": 4, "imdb_id": "tt0133093", "title": "The Matrix",
        "overview": "A hacker learns the true nature of his reality.",
        "release_date": "1999-03-31", "runtime": 136, "budget": 63000000,
        "genres": '["Action", "Science Fiction"]', "language": "en",
        "production_companies": '["Village Roadshow Pictures"]',
    },
    {
        "movie_id": 5, "imdb_id": "tt0068646", "title": "The Godfather",
        "overview": "The aging patriarch of a crime dynasty transfers control.",
        "release_date": "1972-03-14", "runtime": 175, "budget": 6000000,
        "genres": '["Drama", "Crime"]', "language": "",
        "production_companies": "Paramount",
    },
    {
        "movie_id": 6, "imdb_id": "tt0000006", "title": "Million Dollar Test",
        "overview": None,
        "release_date": "2000-01-01", "runtime": None, "budget": 1000000,
        "genres": "not json", "language": None,
        "production_companies": "[broken",
    },
]

RATINGS = [
    {"user_id": 1, "movie_id": 1, "rating": 5.0, "timestamp": 1260759144},
    {"user_id": 2, "movie_id": 1, "rating": 4.0, "timestamp": 1260759179},
    {"user_id": 1, "movie_id": 2, "rating": 3.0, "timestamp": 1260759182},
]


def build_movies_db(path, movies=MOVIES):
    """Create a movies.db file populated with ``movies``."""
    engine = create_engine(f"sqlite:///{path}")
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        session.add_all([Movie(**m) for m in movies])
        session.commit()
    engine.dispose()


def build_ratings_db(path, ratings=RATINGS):
    """Create a ratings.db file; the ratingsDb schema maps to the file's main schema."""
    engine = create_engine(f"sqlite:///{path}").execution_options(
        schema_translate_map={RATINGS_SCHEMA: None}
    )
    with engine.begin() as conn:
        RatingsBase.metadata.create_all(conn, checkfirst=False)
    with Session(engine) as session:
        session.add_all([Rating(**r) for r in ratings])
        session.commit()
    engine.dispose()


@pytest.fixture
def catalog_paths(tmp_path):
    """Paths of freshly built (movies.db, ratings.db)."""
    movies_path = tmp_path / "movies.db"
    ratings_path = tmp_path / "ratings.db"
    build_movies_db(movies_path)
    build_ratings_db(ratings_path)
    return str(movies_path), str(ratings_path)


@pytest_asyncio.fixture
async def db_manager(catalog_paths):
    """Opened DatabaseManager over the fixture databases."""
    movies_path, ratings_path = catalog_paths
    manager = DatabaseManager(movies_db_path=movies_path, ratings_db_path=ratings_path)
    result = await manager.open(quiet=True)
    assert result.ok, result.error
    yield manager
    await manager.close()


@pytest.fixture
def ratings_db_builder():
    """The ratings.db builder, for tests that create the file late."""
    return build_ratings_db


@pytest.fixture
def movies_db_builder():
    """The movies.db builder, for tests that need their own rows."""
    return build_movies_db
