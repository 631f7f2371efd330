#!/usr/bin/env python3
"""Apply the Research Hub schema migrations.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3f1c9a2b7d40
    python scripts/run_migrations.py --downgrade base
"""

import argparse
import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from hub.config import Settings
from hub.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("revision", nargs="?", default="head")
    parser.add_argument(
        "--downgrade",
        action="store_true",
        help="Move down to REVISION instead of up",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Migrate to the requested revision, reporting failures to Logfire."""
    args = parse_args(sys.argv[1:] if argv is None else argv)
    settings = Settings()
    configure_logfire(settings)

    direction = "downgrade" if args.downgrade else "upgrade"
    alembic_cfg = Config(str(ALEMBIC_INI))
    alembic_cfg.set_main_option("script_location", str(ALEMBIC_INI.parent / "migrations"))

    with logfire.span(
        "migrations.run",
        direction=direction,
        revision=args.revision,
        environment=settings.environment,
    ):
        try:
            if args.downgrade:
                command.downgrade(alembic_cfg, args.revision)
            else:
                command.upgrade(alembic_cfg, args.revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # The app must not start against a half-migrated schema
            raise

    logfire.info("Database migrated", direction=direction, revision=args.revision)
    return 0


if __name__ == "__main__":
    sys.exit(main())
