"""Common components shared between sync and aio implementations.

This internal package contains non-I/O code that is identical between
both traversers. It should NOT be imported directly by users.

Important: This package must NEVER import from sync or aio to avoid
circular dependencies.
"""

from .config import SearchConfig, default_concurrency
from .error_policies import (
    ErrorPolicy,
    FailFastPolicy,
    CollectErrorsPolicy,
    ContinueOnErrorsPolicy,
)
from .paths import check_root, resolve_path, normalize_extension, parent_dir

__all__ = [
    'SearchConfig',
    'default_concurrency',
    'ErrorPolicy',
    'FailFastPolicy',
    'CollectErrorsPolicy',
    'ContinueOnErrorsPolicy',
    'check_root',
    'resolve_path',
    'normalize_extension',
    'parent_dir',
]
