"""
Configuration Package

Environment and file based settings.
"""

from .settings import Settings

__all__ = [
    "Settings",
]
