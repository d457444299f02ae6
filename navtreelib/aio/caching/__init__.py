"""
Caching layer for NavTreeLib.

Keeps whole section trees in memory once they have been fetched.
"""

from .tree_cache import TreeCache

__all__ = ['TreeCache']
