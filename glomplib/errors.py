"""Exceptions raised by glomplib.

Only two kinds of failure ever reach the caller of ``find_matches`` or
``find_matches_sync``: an invalid root argument, and a path that was
expected to be a directory but is not. Ordinary filesystem errors are
routed through the configured error policy instead.
"""


class GlompError(Exception):
    """Base class for all glomplib errors."""


class InvalidRootError(GlompError, ValueError):
    """Raised when the root directory passed to a search is not absolute."""

    def __init__(self, root_dir: str):
        self.root_dir = root_dir
        super().__init__(
            f"Root directory must be an absolute path, but got: {root_dir!r}"
        )


class ExpectedDirectoryError(GlompError, NotADirectoryError):
    """Raised when a path queued for traversal turns out not to be a directory."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Expected path to be a directory, but it wasn't: {path}")
