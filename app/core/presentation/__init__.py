"""
Presentation package.

Turns raw catalog rows into the objects returned by the API: JSON-in-text
columns are decoded and missing fields get their display defaults.
"""

from app.core.presentation.movies import safe_parse_json, present_summary, present_details

__all__ = ['safe_parse_json', 'present_summary', 'present_details']
