#!/usr/bin/env python3
"""Apply the comment schema migrations with Logfire error tracking.

Usage:
    python scripts/run_migrations.py                  # upgrade to head
    python scripts/run_migrations.py downgrade base   # drop the comment schema
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from remarks.config import Settings
from remarks.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Run migrations and log any errors to Logfire."""
    settings = Settings()
    configure_logfire(settings)

    direction = argv[1] if len(argv) > 1 else "upgrade"
    target = argv[2] if len(argv) > 2 else "head"
    if direction not in ("upgrade", "downgrade"):
        raise SystemExit(f"Unknown direction: {direction}")

    alembic_cfg = Config("alembic.ini")

    with logfire.span("run_migrations", direction=direction, target=target):
        try:
            getattr(command, direction)(alembic_cfg, target)
        except Exception as e:
            logfire.error(
                "Comment schema migration failed",
                direction=direction,
                target=target,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            raise

    logfire.info("Comment schema migrated", direction=direction, target=target)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
