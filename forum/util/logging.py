"""Stdlib logging for third-party libraries.

uvicorn, SQLAlchemy and alembic log through ``logging``; the forum's own
events go through logfire (see ``forum.util.observability``).
"""

import logging
import sys

from forum.config import Settings

_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

# Chatty at INFO, and already traced by logfire
_QUIET = ("httpx", "httpcore")


def setup_logging(settings: Settings) -> None:
    """Route library logs to stdout at INFO, or DEBUG when ``debug`` is set."""
    level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(
        level=level, format=_FORMAT, datefmt="%H:%M:%S", stream=sys.stdout, force=True
    )
    for name in _QUIET:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("forum").setLevel(level)
