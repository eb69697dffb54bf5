#!/usr/bin/env python3
"""Apply the board schema migrations, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3c1f9a7d2b64
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from board.config import Settings
from board.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Upgrade the database to the requested revision."""
    settings = Settings()
    configure_logfire(settings)

    revision = argv[0] if argv else "head"

    try:
        with logfire.span("run_migrations", revision=revision):
            command.upgrade(Config("alembic.ini"), revision)
        logfire.info("Board schema migrated", revision=revision)
        return 0

    except Exception as e:
        logfire.error(
            "Board schema migration failed",
            revision=revision,
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Fail the deploy rather than serve against a stale schema
        raise


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
