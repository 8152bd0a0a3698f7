"""
Flight Manager
Console manager for flight records kept in a session cache and a MySQL table.

Features:
- Adding, listing, re-gating and deleting flights
- Pushing the session cache into the database on demand
"""

__version__ = '1.0.0'

# Initialize logging when the package is imported
import logging
import sys

from .config.constants import APP_NAME, APP_VERSION, APP_AUTHOR, APP_LICENSE

__author__ = APP_AUTHOR
__license__ = APP_LICENSE

# Configure package logger; console narration owns stdout
root_logger = logging.getLogger("flight_manager")
root_logger.setLevel(logging.INFO)
root_logger.propagate = False

if not root_logger.handlers:
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG)
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

from . import config
from . import data

root_logger.debug(f"Initializing {APP_NAME} v{APP_VERSION}")
