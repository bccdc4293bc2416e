"""
Unit tests for response shaping.
"""

import logging

import pytest

from app.core.presentation import present_details, present_summary, safe_parse_json


class TestSafeParseJson:
    """Tests for safe_parse_json."""

    def test_parses_array(self):
        assert safe_parse_json('["Action"]') == ["Action"]

    def test_parses_object(self):
        assert safe_parse_json('{"name": "Miramax"}') == {"name": "Miramax"}

    def test_ignores_surrounding_whitespace(self):
        assert safe_parse_json('  ["Drama", "Crime"]\n') == ["Drama", "Crime"]

    def test_plain_text_returns_fallback(self):
        assert safe_parse_json("not json") == []

    @pytest.mark.parametrize("value", [None, "", 42])
    def test_missing_or_non_text_returns_fallback(self, value):
        assert safe_parse_json(value) == []

    def test_custom_fallback(self):
        assert safe_parse_json(None, {}) == {}

    def test_default_fallback_is_not_shared(self):
        first = safe_parse_json(None)
        first.append("x")
        assert safe_parse_json(None) == []

    def test_malformed_json_returns_fallback(self, caplog):
        """Text that looks like JSON but does not parse degrades with a warning."""
        with caplog.at_level(logging.WARNING, logger="app.core.presentation.movies"):
            assert safe_parse_json("[broken") == []

        assert "Malformed JSON" in caplog.text


class TestPresentSummary:

    def test_decodes_genres(self):
        row = {
            "imdbId": "tt1234567",
            "title": "Test Movie",
            "genres": '["Action"]',
            "releaseDate": "2000-01-01",
            "budget": "$1,000,000",
        }

        movie = present_summary(row)

        assert movie == {**row, "genres": ["Action"]}
        assert row["genres"] == '["Action"]'

    def test_missing_genres(self):
        assert present_summary({"imdbId": "tt1", "genres": None})["genres"] == []


class TestPresentDetails:

    def _row(self, **overrides):
        row = {
            "imdb_id": "tt1234567",
            "title": "Test Movie",
            "description": "A test.",
            "release_date": "2000-01-01",
            "budget": "$1,000,000",
            "runtime": 120,
            "genres": '["Drama"]',
            "original_language": "en",
            "production_companies": '["Test Studio"]',
            "average_rating": 8.5,
        }
        row.update(overrides)
        return row

    def test_decodes_json_columns(self):
        movie = present_details(self._row())

        assert movie["genres"] == ["Drama"]
        assert movie["production_companies"] == ["Test Studio"]
        assert movie["original_language"] == "en"
        assert movie["budget"] == "$1,000,000"
        assert movie["average_rating"] == 8.5

    @pytest.mark.parametrize("language", [None, ""])
    def test_defaults_original_language(self, language):
        assert present_details(self._row(original_language=language))["original_language"] == "Unknown"

    def test_non_json_companies(self):
        assert present_details(self._row(production_companies="Paramount"))["production_companies"] == []
