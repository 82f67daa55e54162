"""Opt-in semantic validation for desktop entries.

Python 3.13+.
"""

from .entry import validate

__all__ = ["validate"]
