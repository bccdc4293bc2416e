"""
FastAPI application entry point for the Movie Catalog API.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.api.config import (
    get_api_host,
    get_api_port,
    get_movies_db_path,
    get_ratings_db_path,
    is_test_env,
)
from app.api.routers import movies, system
from app.database.connection import DatabaseManager

logger = logging.getLogger(__name__)


class DatabaseStartupError(RuntimeError):
    """The movies database could not be opened at startup."""


def _validation_message(exc: RequestValidationError) -> str:
    """First violated constraint, e.g. 'page: Input should be greater than or equal to 1'."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ()) if part not in ("query", "path"))
    return f"{field}: {first.get('msg')}" if field else str(first.get("msg"))


def _storage_message(exc: SQLAlchemyError) -> str:
    # DBAPIError wraps the driver exception; its text is the useful part
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


def create_app(db_manager: Optional[DatabaseManager] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        db_manager: Manager to serve from. If omitted, one is built from the
            MOVIES_DB_PATH / RATINGS_DB_PATH configuration at startup.

    Returns:
        Configured FastAPI app
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        manager = db_manager or DatabaseManager(
            movies_db_path=get_movies_db_path(),
            ratings_db_path=get_ratings_db_path(),
        )
        testing = is_test_env()
        result = await manager.open(quiet=testing)
        if not result.ok:
            await manager.close()
            if testing:
                raise DatabaseStartupError(str(result.error)) from result.error
            logger.critical("Failed to connect to SQLite database: %s", result.error)
            raise SystemExit(1)
        app.state.db_manager = manager
        try:
            yield
        finally:
            await manager.close()

    app = FastAPI(
        title="Movie Catalog API",
        description="Read-only REST API for browsing movies and their average ratings",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": _validation_message(exc)})

    @app.exception_handler(SQLAlchemyError)
    async def storage_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error("Storage error on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=500, content={"error": _storage_message(exc)})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": str(exc)})

    app.include_router(movies.router)
    app.include_router(system.router)

    @app.get("/")
    def root():
        """Root endpoint."""
        return {
            "message": "Movie Catalog API",
            "docs": "/docs",
            "movies": "/api/movies",
            "health": "/api/health",
        }

    return app


app = create_app()


def main():
    """Run the API server with uvicorn."""
    import uvicorn

    from app.utils.logging_config import configure_api_logging

    configure_api_logging()
    uvicorn.run(app, host=get_api_host(), port=get_api_port(), log_config=None)


if __name__ == "__main__":
    main()
