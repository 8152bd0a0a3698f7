"""
Constants for Flight Manager.
These are fixed values that don't change during application execution.
"""

# Application information
APP_NAME = "Flight Management System"
APP_VERSION = "1.0.0"
APP_AUTHOR = "Flight Manager Contributors"
APP_LICENSE = "MIT License"
APP_DESCRIPTION = "Console flight-record manager backed by an in-memory cache and a MySQL table"

# Database defaults
DEFAULT_DB_HOST = "localhost"
DEFAULT_DB_PORT = 3308
DEFAULT_DB_NAME = "flight_db"
DEFAULT_DB_USER = "root"
DEFAULT_DB_PASSWORD = ""

# Storage layout
FLIGHTS_TABLE = "flights"
FLIGHT_COLUMNS = (
    "flight_number",
    "airline",
    "departure_time",
    "arrival_time",
    "terminal",
    "gate",
)

# Flight defaults
DEFAULT_FLIGHT_CATEGORY = "domestic"

# Menu choices
MENU_ADD = 1
MENU_VIEW = 2
MENU_UPDATE = 3
MENU_DELETE = 4
MENU_SYNC = 5
MENU_EXIT = 6
