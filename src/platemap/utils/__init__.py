"""
Utility package for platemap.

- logger: logging setup.
"""

from .logger import setup_logging

__all__ = [
    'setup_logging',
]
