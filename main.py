#!/usr/bin/env python3

"""
Entry point script that launches the interactive flight manager.
"""

import argparse
import logging
import sys

from flight_manager.config.settings import settings
from flight_manager.core.registry import create_flight_manager
from flight_manager.errors import StoreError
from flight_manager.io.store import connect_store
from flight_manager.ui.cli import CLI

logger = logging.getLogger("flight_manager.main")


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Flight Management System'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    level = 'DEBUG' if args.debug else str(settings.get('log_level', 'INFO')).upper()
    logging.getLogger("flight_manager").setLevel(getattr(logging, level, logging.INFO))

    try:
        with connect_store(settings.get_database_config()) as store:
            manager = create_flight_manager(store)
            cli = CLI(manager, default_category=settings.get_default_category())
            cli.run()
    except StoreError as e:
        logger.debug(f"Session ended by database error: {e!r}")
        print(f"Database error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
