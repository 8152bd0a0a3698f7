"""
Exceptions raised by Flight Manager.
"""


class FlightManagerError(Exception):
    """Base class for all Flight Manager errors"""


class StoreError(FlightManagerError):
    """A database statement or connection failed"""
