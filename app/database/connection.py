"""
Database connection management using SQLAlchemy's asyncio extension.

This module owns the single shared connection to the movies database and
attaches the ratings database to it the first time a query needs it.
"""

import asyncio
import logging
import os
from dataclasses import dataclass
from typing import Optional

from sqlalchemy import text
from sqlalchemy.engine import URL
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool

from app.database.models import RATINGS_SCHEMA

logger = logging.getLogger(__name__)


# Default database paths
DEFAULT_MOVIES_DB_PATH = "db/movies.db"
DEFAULT_RATINGS_DB_PATH = "db/ratings.db"


def get_database_url(db_path: str = DEFAULT_MOVIES_DB_PATH, read_only: bool = True) -> URL:
    """
    Get the aiosqlite database URL for a database file.

    Args:
        db_path: Path to SQLite database file
        read_only: Open through a ``mode=ro`` URI so a missing file is an
            error instead of a freshly created empty database

    Returns:
        SQLAlchemy database URL
    """
    abs_path = os.path.abspath(db_path)
    if not read_only:
        return URL.create("sqlite+aiosqlite", database=abs_path)
    return URL.create(
        "sqlite+aiosqlite",
        database=f"file:{abs_path}",
        query={"mode": "ro", "uri": "true"},
    )


def get_attach_target(db_path: str, read_only: bool = True) -> str:
    """Filename passed to ``ATTACH DATABASE`` for the ratings file."""
    abs_path = os.path.abspath(db_path)
    return f"file:{abs_path}?mode=ro" if read_only else abs_path


@dataclass(frozen=True)
class StartupResult:
    """Outcome of opening the primary database."""

    ok: bool
    error: Optional[BaseException] = None


class DatabaseManager:
    """
    Database connection manager.

    Holds one async engine on the movies database. ``StaticPool`` keeps a
    single DBAPI connection for the whole process so that the ratings
    database, once attached, is visible to every later query.
    """

    def __init__(
        self,
        movies_db_path: str = DEFAULT_MOVIES_DB_PATH,
        ratings_db_path: str = DEFAULT_RATINGS_DB_PATH,
        read_only: bool = True,
        echo: bool = False,
    ):
        """
        Initialize database manager.

        Args:
            movies_db_path: Path to the movies SQLite file
            ratings_db_path: Path to the ratings SQLite file
            read_only: Open both files read-only
            echo: If True, log all SQL statements (useful for debugging)
        """
        self.movies_db_path = movies_db_path
        self.ratings_db_path = ratings_db_path
        self.read_only = read_only
        self.database_url = get_database_url(movies_db_path, read_only=read_only)

        self.engine: AsyncEngine = create_async_engine(
            self.database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

        self._ratings_attached = False
        self._attach_lock = asyncio.Lock()

    @property
    def is_ratings_attached(self) -> bool:
        return self._ratings_attached

    async def open(self, quiet: bool = False) -> StartupResult:
        """
        Connect to the movies database and check it answers a query.

        Never raises for connection problems; the caller decides what a
        failed startup means.

        Args:
            quiet: Skip the success log line (used under test configuration)

        Returns:
            StartupResult describing success or the failure cause
        """
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception as e:
            return StartupResult(ok=False, error=e)
        if not quiet:
            logger.info("Connected to SQLite database: %s", self.movies_db_path)
        return StartupResult(ok=True)

    async def attach_ratings(self) -> None:
        """
        Attach the ratings database under the ``ratingsDb`` alias.

        Idempotent. Concurrent first callers wait on one lock so exactly one
        ATTACH statement runs. On failure the error propagates and the
        manager stays unattached, so the next call tries again.
        """
        if self._ratings_attached:
            return
        async with self._attach_lock:
            if self._ratings_attached:
                return
            target = get_attach_target(self.ratings_db_path, read_only=self.read_only)
            async with self.engine.connect() as conn:
                await conn.execute(
                    text(f"ATTACH DATABASE :path AS {RATINGS_SCHEMA}"),
                    {"path": target},
                )
            self._ratings_attached = True
            logger.info("Attached ratings database: %s", self.ratings_db_path)

    def connect(self) -> AsyncConnection:
        """
        Get an async connection context.

        Usage:
            async with db_manager.connect() as conn:
                result = await conn.execute(stmt)
        """
        return self.engine.connect()

    async def close(self):
        """Close the database engine and its connection."""
        await self.engine.dispose()
        # A fresh connection would not carry the ATTACH
        self._ratings_attached = False
