"""Process-wide logging setup."""

from __future__ import annotations

import logging

from asset_registry.core.config import Settings


def configure_logging(settings: Settings) -> None:
    """Apply the configured level and format to the root logger."""
    logging.basicConfig(level=settings.log_level, format=settings.logging.format)
    logging.getLogger("asset_registry").setLevel(settings.log_level)
    # SQL echo is controlled by database.echo, keep the engine logger quiet otherwise.
    if not settings.database.echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
