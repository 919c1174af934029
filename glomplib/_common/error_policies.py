"""
Error handling policies for glomplib.

Filesystem errors met while searching (a directory that vanished, an
entry we are not allowed to stat) are handed to a policy object, which
decides whether the search skips the affected path or stops.

Policies are plain synchronous objects so the sync and aio traversers
share them unchanged.
"""

import sys
from abc import ABC, abstractmethod
from typing import Any, Dict, List


class ErrorPolicy(ABC):
    """
    Base class for error handling policies.

    Subclasses implement different strategies for handling errors
    that occur during filesystem operations.
    """

    @abstractmethod
    def handle(self, error: Exception, operation: str, path: str) -> None:
        """
        Handle an error that occurred during a filesystem operation.

        Args:
            error: The exception that was raised
            operation: What failed ('stat_dir', 'list_dir' or 'stat_entry')
            path: The path being processed when the error occurred

        Returns:
            None to skip the path and continue the search. Raise to stop it.
        """


class FailFastPolicy(ErrorPolicy):
    """
    Policy that immediately re-raises any error, stopping the search.

    Useful when partial results are not acceptable.
    """

    def handle(self, error: Exception, operation: str, path: str) -> None:
        """Re-raise the error immediately."""
        raise error


class CollectErrorsPolicy(ErrorPolicy):
    """
    Policy that silently collects errors and skips the affected paths.

    Useful for presenting every problem once the search has finished.
    """

    def __init__(self):
        """Initialize the policy."""
        self.errors: List[Dict[str, Any]] = []
        self.skipped_paths: List[str] = []

    def handle(self, error: Exception, operation: str, path: str) -> None:
        """Record the error and skip the path."""
        self._record(error, operation, path)

    def _record(self, error: Exception, operation: str, path: str) -> None:
        self.errors.append({
            'path': path,
            'operation': operation,
            'error': error,
            'error_type': type(error).__name__,
            'error_message': str(error)
        })
        self.skipped_paths.append(path)

    def get_statistics(self) -> dict:
        """
        Get statistics about errors encountered.

        Returns:
            Dictionary with error counts and details
        """
        return {
            'total_errors': len(self.errors),
            'permission_errors': sum(1 for e in self.errors if e['error_type'] == 'PermissionError'),
            'not_found_errors': sum(1 for e in self.errors if e['error_type'] == 'FileNotFoundError'),
            'skipped_paths': len(self.skipped_paths),
            'errors': self.errors
        }


class ContinueOnErrorsPolicy(CollectErrorsPolicy):
    """
    Policy that records errors, optionally warns, and continues.

    This is the default: a search never aborts because of one bad path,
    and with ``verbose=False`` nothing is printed at all.
    """

    def __init__(self, verbose: bool = False):
        """
        Initialize the policy.

        Args:
            verbose: If True, print warnings to stderr when errors occur
        """
        super().__init__()
        self.verbose = verbose

    def handle(self, error: Exception, operation: str, path: str) -> None:
        """Record the error, warn if verbose, and skip the path."""
        self._record(error, operation, path)

        if self.verbose:
            if isinstance(error, PermissionError):
                print(f"\nWARNING: Skipping inaccessible path '{path}': {error}", file=sys.stderr)
            else:
                print(f"\nWARNING: Error in {operation} for '{path}': {error}", file=sys.stderr)
