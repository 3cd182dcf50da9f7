"""Logging setup for dagseg."""

import logging

from .config import get_settings

_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure stdlib logging once for the CLI.

    Falls back to the configured DAGSEG_LOG_LEVEL when ``level`` is None.
    """
    lvl = (level or get_settings().log_level).upper()
    logging.basicConfig(level=getattr(logging, lvl, logging.WARNING), format=_DEFAULT_FORMAT)
