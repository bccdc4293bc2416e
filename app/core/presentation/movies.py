"""
Row shaping for movie list and detail responses.
"""

import json
import logging
from typing import Any, Dict, Mapping, Optional

logger = logging.getLogger(__name__)


UNKNOWN_LANGUAGE = "Unknown"


def safe_parse_json(value: Any, fallback: Optional[Any] = None) -> Any:
    """
    Decode a JSON-in-text column.

    Only text that starts with '[' or '{' (after trimming) is parsed;
    anything else, including None, returns the fallback. Text that looks
    like JSON but does not parse also returns the fallback and logs a
    warning.

    Args:
        value: Stored column value
        fallback: Value returned when decoding is not possible
            (default: a new empty list)

    Returns:
        Decoded value or fallback
    """
    if fallback is None:
        fallback = []
    if not isinstance(value, str):
        return fallback
    stripped = value.strip()
    if not stripped.startswith(("[", "{")):
        return fallback
    try:
        return json.loads(stripped)
    except ValueError as e:
        logger.warning("Malformed JSON column value %r: %s", value[:80], e)
        return fallback


def present_summary(row: Mapping[str, Any]) -> Dict[str, Any]:
    """Shape a list row: decode genres."""
    movie = dict(row)
    movie["genres"] = safe_parse_json(movie.get("genres"), [])
    return movie


def present_details(row: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Shape a detail row.

    Decodes genres and production companies and defaults an empty
    original language to 'Unknown'. Budget and the remaining fields pass
    through untouched.
    """
    movie = dict(row)
    movie["genres"] = safe_parse_json(movie.get("genres"), [])
    movie["production_companies"] = safe_parse_json(movie.get("production_companies"), [])
    movie["original_language"] = movie.get("original_language") or UNKNOWN_LANGUAGE
    return movie
