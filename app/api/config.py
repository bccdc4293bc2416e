"""
API configuration loaded from environment or defaults.
"""

import os
from pathlib import Path
from typing import Optional


def _default_db_dir() -> Path:
    return Path(__file__).resolve().parents[2] / "db"


def get_movies_db_path() -> str:
    """Get movies database file path from env or default."""
    return os.getenv("MOVIES_DB_PATH", "") or str(_default_db_dir() / "movies.db")


def get_ratings_db_path() -> str:
    """Get ratings database file path from env or default."""
    return os.getenv("RATINGS_DB_PATH", "") or str(_default_db_dir() / "ratings.db")


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_file() -> Optional[str]:
    """Get log file name from env; None logs to console only."""
    return os.getenv("LOG_FILE") or None


def get_log_dir() -> str:
    """Get directory for log files from env or default."""
    return os.getenv("LOG_DIR", "logs")


def get_app_env() -> str:
    """Get runtime environment name (development, production, test)."""
    return os.getenv("APP_ENV", "development").lower()


def is_test_env() -> bool:
    """True when running under the test configuration."""
    return get_app_env() == "test"


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("API_PORT", "3000"))
