"""Path helpers shared by the rule builders and both traversers.

All paths are handled as plain POSIX-style strings. Prefix comparisons in
the rules are raw string comparisons, so these helpers never normalize
beyond what ``os.path`` does when joining.
"""

import os
from typing import Union

from ..errors import InvalidRootError

PathLike = Union[str, "os.PathLike[str]"]


def check_root(root_dir: PathLike) -> str:
    """Validate the root of a search.

    Raises:
        InvalidRootError: If ``root_dir`` is not an absolute path
    """
    root_dir = os.fspath(root_dir)
    if not os.path.isabs(root_dir):
        raise InvalidRootError(root_dir)
    return root_dir


def resolve_path(some_path: PathLike, root_dir: str) -> str:
    """Resolve ``some_path`` against ``root_dir`` and strip a trailing slash.

    Absolute paths are returned unchanged apart from the trailing slash.
    """
    resolved = os.fspath(some_path)
    if not os.path.isabs(resolved):
        resolved = os.path.normpath(os.path.join(root_dir, resolved))
    if len(resolved) > 1 and resolved.endswith("/"):
        resolved = resolved[:-1]
    return resolved


def normalize_extension(extension: str) -> str:
    """Return ``extension`` with a leading dot."""
    if not extension.startswith("."):
        return "." + extension
    return extension


def parent_dir(absolute_path: str) -> str:
    """Return the directory containing ``absolute_path``."""
    return os.path.dirname(absolute_path)
