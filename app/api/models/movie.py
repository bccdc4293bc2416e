"""
Pydantic schemas for Movie API.
"""

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# Decoded JSON-in-text column: normally a list, an object if that is what was stored
JsonColumn = Union[List[Any], Dict[str, Any]]


class MovieQuery(BaseModel):
    """Query parameters accepted by the list endpoints."""

    model_config = ConfigDict(extra="forbid")

    page: Optional[int] = Field(None, ge=1)
    pageSize: Optional[int] = Field(None, ge=1)
    sort: Optional[Literal["asc", "desc"]] = None


class MovieSummary(BaseModel):
    """Response model for a movie in a list."""

    imdbId: str
    title: Optional[str]
    genres: JsonColumn
    releaseDate: Optional[str]
    budget: str


class MovieDetails(BaseModel):
    """Response model for a single movie with its average rating."""

    imdb_id: str
    title: Optional[str]
    description: Optional[str]
    release_date: Optional[str]
    budget: str
    runtime: Optional[Union[int, float]]
    genres: JsonColumn
    original_language: str
    production_companies: JsonColumn
    average_rating: Optional[float]


class ErrorResponse(BaseModel):
    """Body returned for validation and server errors."""

    error: str


class MessageResponse(BaseModel):
    """Body returned when a movie is not found."""

    message: str
