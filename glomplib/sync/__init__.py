"""Synchronous implementation of glomplib.

Sequential, single-threaded traversal. Mostly useful for scripts and for
checking the aio traverser against.
"""

from .traverser import FrontierTraverser, find_matches_sync

__all__ = [
    'FrontierTraverser',
    'find_matches_sync',
]
