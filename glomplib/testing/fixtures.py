"""Test fixtures for glomplib consumers.

Builds the small directory tree the glomplib test-suite searches, and
helps compare absolute results against readable relative paths.
"""

import os
from pathlib import Path
from typing import Iterable, List, Union

# Files of the canonical fixture tree, relative to its root
FIXTURE_FILES = (
    "blah.h",
    "hello.txt",
    "dir-1/fox.ts",
    "dir-2/foof.txt",
    "dir-2/potato.d.ts",
    "dir-1/dir-b/smiley.cfg",
    "dir-1/dir-b/dir-2/blah.txt",
)


def create_fixture_tree(base_dir: Union[str, Path]) -> Path:
    """Create the canonical fixture tree under ``base_dir``.

    Structure:
    base_dir/
    ├── blah.h
    ├── hello.txt
    ├── dir-1/
    │   ├── fox.ts
    │   └── dir-b/
    │       ├── smiley.cfg
    │       └── dir-2/
    │           └── blah.txt
    └── dir-2/
        ├── foof.txt
        └── potato.d.ts

    Returns:
        ``base_dir`` as an absolute Path
    """
    base = Path(base_dir).absolute()
    for relative in FIXTURE_FILES:
        path = base / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"{relative}\n")
    return base


def make_relative(paths: Iterable[str], root_dir: Union[str, Path]) -> List[str]:
    """Strip ``root_dir`` from each path, keeping POSIX separators."""
    root = os.fspath(root_dir)
    return [os.path.relpath(path, root).replace(os.sep, "/") for path in paths]
