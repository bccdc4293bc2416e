"""
Logging configuration for the movie catalog API.

Console output always; a rotating file under LOG_DIR when LOG_FILE is set.
"""

import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import List, Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Libraries that log every statement or thread hop at INFO/DEBUG
QUIET_LOGGERS = ('sqlalchemy.engine', 'aiosqlite', 'uvicorn.access')


def _build_handlers(
    log_path: Optional[Path],
    max_bytes: int,
    backup_count: int,
) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(log_path, maxBytes=max_bytes, backupCount=backup_count)
        )
    return handlers


def setup_logging(
    log_file: Optional[str] = None,
    level: str = "INFO",
    log_dir: str = "logs",
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5
) -> None:
    """
    Configure the root logger, replacing any handlers already attached.

    Args:
        log_file: Name of log file (default: None, logs to console only)
        level: Logging level name, case insensitive
        log_dir: Directory for log files (default: 'logs')
        max_bytes: Maximum size of log file before rotation (default: 10MB)
        backup_count: Number of backup files to keep (default: 5)
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    log_path = Path(log_dir) / log_file if log_file else None
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()
    for handler in _build_handlers(log_path, max_bytes, backup_count):
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    if log_path is not None:
        root_logger.info("Logging to file: %s", log_path)


def configure_api_logging() -> None:
    """Configure logging for the API server from LOG_LEVEL, LOG_FILE and LOG_DIR."""
    from app.api.config import get_log_dir, get_log_file, get_log_level

    setup_logging(
        log_file=get_log_file(),
        level=get_log_level(),
        log_dir=get_log_dir(),
    )
