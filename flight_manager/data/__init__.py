"""
Data package for Flight Manager.
Contains the flight record model.
"""

from .models import FlightRecord, FlightCategory

__all__ = [
    'FlightRecord',
    'FlightCategory',
]
