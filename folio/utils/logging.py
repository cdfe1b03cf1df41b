"""Logging setup for the folio command line."""

import logging
import sys

from ..config import Config

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def setup_logging(log_level: str | None = None) -> None:
    """Send log records to stdout at the configured level.

    Safe to call more than once: the handler is installed on the first call,
    and every call reapplies the level so a later ``.env`` or ``FOLIO_LOG_LEVEL``
    still takes effect.

    Args:
        log_level: Level name such as "DEBUG". Read from ``log_level`` in the config when None.
    """
    if log_level is None:
        log_level = Config().get("log_level", "INFO")

    level = getattr(logging, str(log_level).upper(), logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S", stream=sys.stdout)
    logging.getLogger().setLevel(level)

    # The preview server logs its own requests; keep uvicorn and httpx quiet
    for name in ("uvicorn.access", "uvicorn.error", "httpx"):
        logging.getLogger(name).setLevel(logging.WARNING)
