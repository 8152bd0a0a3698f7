"""
Configuration package for Flight Manager.
Contains settings and constants used across the application.
"""

from .constants import *
from .settings import settings, Settings, DatabaseConfig

__all__ = ['settings', 'Settings', 'DatabaseConfig']
