"""Asynchronous implementation of glomplib.

This package contains the asyncio traverser, which stats and lists
several directories concurrently while returning results in the same
order as the sync traverser.
"""

from .jobs import run_jobs
from .traverser import AsyncFrontierTraverser, find_matches

__all__ = [
    'AsyncFrontierTraverser',
    'find_matches',
    'run_jobs',
]
