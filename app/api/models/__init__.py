"""
Pydantic schemas for API request/response validation.
"""

from app.api.models.movie import (
    MovieQuery,
    MovieSummary,
    MovieDetails,
    ErrorResponse,
    MessageResponse,
)

__all__ = [
    "MovieQuery",
    "MovieSummary",
    "MovieDetails",
    "ErrorResponse",
    "MessageResponse",
]
