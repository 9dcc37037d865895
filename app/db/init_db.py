"""Create (or recreate) the catalog tables.

Usage: ``python -m app.db.init_db [--drop]``
"""

import argparse
import logging

import app.models  # noqa: F401
from app.core.logging import configure_logging
from app.db.base import Base
from app.db.session import engine

logger = logging.getLogger(__name__)


def init_db(drop: bool = False) -> None:
    if drop:
        Base.metadata.drop_all(bind=engine)
        logger.info("Dropped all tables")
    Base.metadata.create_all(bind=engine)
    logger.info("Created tables: %s", ", ".join(sorted(Base.metadata.tables)))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Initialise the catalog database.")
    parser.add_argument("--drop", action="store_true", help="drop existing tables first")
    args = parser.parse_args(argv)
    configure_logging()
    init_db(drop=args.drop)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
