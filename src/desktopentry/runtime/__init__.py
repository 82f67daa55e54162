"""Query-time operations on parsed desktop entries.

Python 3.13+.
"""

from .resolver import candidate_locales, resolve

__all__ = [
    "candidate_locales",
    "resolve",
]
