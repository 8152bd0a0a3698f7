"""
User interface package for Flight Manager.
"""

from .cli import CLI

__all__ = ['CLI']
