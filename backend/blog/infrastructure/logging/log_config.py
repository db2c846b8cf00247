"""Centralized logging configuration.

Applies per-category log levels from Settings so that noisy loggers
(SQL statements, connection pool chatter, access logs) can be silenced
without affecting the application's own loggers.

Usage:
    from blog.infrastructure.logging.log_config import setup_logging
    setup_logging(settings)   # Call once at startup (in the lifespan)
"""

import logging
import sys

from blog.config import Settings


# ── Logger-name → Settings-field mapping ────────────────────────────

_CATEGORY_MAP: dict[str, list[str]] = {
    "log_level_sql": [
        "sqlalchemy.engine",
        "sqlalchemy.pool",
        "aiomysql",
        "aiosqlite",
        "asyncpg",
    ],
    "log_level_uvicorn": [
        "uvicorn",
        "uvicorn.access",
        "uvicorn.error",
    ],
}


def setup_logging(settings: Settings) -> None:
    """Configure Python logging levels from application settings."""
    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))

    # uvicorn installs its own handlers on its loggers, not on the root
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)-8s %(name)s — %(message)s",
            )
        )
        root.addHandler(handler)

    for settings_field, logger_names in _CATEGORY_MAP.items():
        level = _parse_level(getattr(settings, settings_field, "INFO"))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Logging configured — root=%s, sql=%s, uvicorn=%s",
        settings.log_level,
        settings.log_level_sql,
        settings.log_level_uvicorn,
    )


def _parse_level(raw: str) -> int:
    """Convert a level name string to a logging constant, defaulting to INFO."""
    numeric = getattr(logging, raw.upper(), None)
    if isinstance(numeric, int):
        return numeric
    return logging.INFO
