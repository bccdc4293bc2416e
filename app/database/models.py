"""
SQLAlchemy ORM models describing the movie catalog databases.

The catalog lives in two SQLite files: ``movies.db`` holds the ``movies``
table and ``ratings.db`` holds the ``ratings`` table. The ratings file is
attached to the movies connection under the ``ratingsDb`` alias, so the
Rating model is declared in that schema and rendered as ``ratingsDb.ratings``.

Both files are produced outside this service; these declarations mirror
their columns so queries can be composed with SQLAlchemy Core.
"""

from sqlalchemy import Float, Index, Integer, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


# Alias the ratings database is attached under
RATINGS_SCHEMA = "ratingsDb"


class Base(DeclarativeBase):
    """Base class for tables in the primary (movies) database."""
    pass


class RatingsBase(DeclarativeBase):
    """Base class for tables in the attached ratings database."""
    pass


class Movie(Base):
    """
    Movie table storing catalog metadata.

    Attributes:
        movie_id: Internal numeric key, referenced by ratings
        imdb_id: External IMDb identifier (e.g. 'tt0111161')
        title: Movie title
        overview: Free-text description
        release_date: Release date as ISO 'YYYY-MM-DD' text
        runtime: Runtime in minutes
        budget: Production budget in dollars
        genres: JSON array of genres stored as text
        language: Original language code
        production_companies: JSON array of company names stored as text
    """
    __tablename__ = 'movies'

    movie_id: Mapped[int] = mapped_column("movieId", Integer, primary_key=True)
    imdb_id: Mapped[str] = mapped_column("imdbId", Text, nullable=False, unique=True)
    title: Mapped[str] = mapped_column(Text, nullable=True)
    overview: Mapped[str] = mapped_column(Text, nullable=True)
    release_date: Mapped[str] = mapped_column("releaseDate", Text, nullable=True)
    runtime: Mapped[int] = mapped_column(Integer, nullable=True)
    budget: Mapped[int] = mapped_column(Integer, nullable=True)
    genres: Mapped[str] = mapped_column(Text, nullable=True)  # JSON array as text
    language: Mapped[str] = mapped_column(Text, nullable=True)
    production_companies: Mapped[str] = mapped_column(
        "productionCompanies", Text, nullable=True
    )  # JSON array as text

    __table_args__ = (
        Index('idx_movies_release_date', 'releaseDate'),
    )

    def __repr__(self) -> str:
        return f"<Movie(movie_id={self.movie_id}, imdb_id='{self.imdb_id}', title='{self.title}')>"


class Rating(RatingsBase):
    """
    Rating table storing individual user ratings.

    Ratings reference movies by ``movieId`` (the internal key), never by
    IMDb id. The average is computed at query time.
    """
    __tablename__ = 'ratings'

    user_id: Mapped[int] = mapped_column("userId", Integer, primary_key=True)
    movie_id: Mapped[int] = mapped_column("movieId", Integer, primary_key=True)
    rating: Mapped[float] = mapped_column(Float, nullable=False)
    timestamp: Mapped[int] = mapped_column(Integer, nullable=True)

    __table_args__ = (
        Index('idx_ratings_movie', 'movieId'),
        {'schema': RATINGS_SCHEMA},
    )

    def __repr__(self) -> str:
        return f"<Rating(user_id={self.user_id}, movie_id={self.movie_id}, rating={self.rating})>"
