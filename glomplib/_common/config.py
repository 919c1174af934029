"""Configuration for glomplib searches.

Controls how many directories the aio traverser works on at once and what
happens when the filesystem misbehaves.
"""

import os
from dataclasses import dataclass
from typing import List, Optional

from .error_policies import (
    ContinueOnErrorsPolicy,
    ErrorPolicy,
    FailFastPolicy,
)


def default_concurrency() -> int:
    """Number of CPUs minus one, but never less than one."""
    return max(1, (os.cpu_count() or 1) - 1)


@dataclass
class SearchConfig:
    """Configuration shared by ``find_matches`` and ``find_matches_sync``."""

    # Maximum directories processed concurrently by the aio traverser.
    # None means default_concurrency().
    concurrency: Optional[int] = None

    # What to do with stat/listdir failures. None means a fresh
    # ContinueOnErrorsPolicy for every search.
    error_policy: Optional[ErrorPolicy] = None

    @classmethod
    def strict(cls, concurrency: Optional[int] = None) -> 'SearchConfig':
        """Create config that aborts on the first filesystem error.

        Args:
            concurrency: Maximum concurrent directories

        Returns:
            SearchConfig using FailFastPolicy
        """
        return cls(concurrency=concurrency, error_policy=FailFastPolicy())

    @classmethod
    def lenient(cls, verbose: bool = False, concurrency: Optional[int] = None) -> 'SearchConfig':
        """Create config that skips unreadable paths.

        Args:
            verbose: Print a warning to stderr for each skipped path
            concurrency: Maximum concurrent directories

        Returns:
            SearchConfig using ContinueOnErrorsPolicy
        """
        return cls(concurrency=concurrency, error_policy=ContinueOnErrorsPolicy(verbose=verbose))

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.concurrency is not None:
            if isinstance(self.concurrency, bool) or not isinstance(self.concurrency, int):
                errors.append("concurrency must be an integer")
            elif self.concurrency < 1:
                errors.append("concurrency must be at least 1")

        if self.error_policy is not None and not isinstance(self.error_policy, ErrorPolicy):
            errors.append("error_policy must be an ErrorPolicy instance")

        return errors

    def resolved_concurrency(self, override: Optional[int] = None) -> int:
        """Concurrency to use for one search.

        Args:
            override: Per-call value taking precedence over the config

        Returns:
            A positive worker count

        Raises:
            ValueError: If the chosen value is not a positive integer
        """
        concurrency = override if override is not None else self.concurrency
        if concurrency is None:
            return default_concurrency()
        if isinstance(concurrency, bool) or not isinstance(concurrency, int) or concurrency < 1:
            raise ValueError(f"concurrency must be a positive integer, got {concurrency!r}")
        return concurrency

    def resolved_error_policy(self) -> ErrorPolicy:
        """Error policy to use for one search.

        A configured policy is shared by every search run with this config.
        Without one, each call gets its own ContinueOnErrorsPolicy, so
        skipped paths never pile up across searches.
        """
        if self.error_policy is None:
            return ContinueOnErrorsPolicy()
        return self.error_policy
