#!/usr/bin/env python3
"""Upgrade the forum schema, to ``head`` or to the revision given.

    python scripts/run_migrations.py
    python scripts/run_migrations.py 3c1f0e9a7b21
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from forum.config import Settings
from forum.util.logging import setup_logging
from forum.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    target = argv[1] if len(argv) > 1 else "head"
    with logfire.span("migrations.upgrade", target=target):
        try:
            command.upgrade(Config("alembic.ini"), target)
        except Exception as e:
            logfire.error(
                "Schema upgrade failed",
                target=target,
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail the deploy rather than serve on a stale schema
            raise

    logfire.info("Schema upgraded", target=target)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
