"""
Recursive file discovery filtered by extension.
"""

from .walker import find, iter_matches, matches_extension

__all__ = [
    "find",
    "iter_matches",
    "matches_extension",
]
