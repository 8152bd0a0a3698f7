"""
Core package for Flight Manager.
Contains the session cache and the flight registry.
"""

from .cache import FlightCache
from .registry import FlightManager, HybridFlightManager, OperationOutcome, create_flight_manager

__all__ = [
    'FlightCache',
    'FlightManager',
    'HybridFlightManager',
    'OperationOutcome',
    'create_flight_manager',
]
