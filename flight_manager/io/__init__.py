"""
I/O package for Flight Manager.
Contains the MySQL-backed flight store.
"""

from .store import FlightStore, connect_store

__all__ = [
    'FlightStore',
    'connect_store',
]
