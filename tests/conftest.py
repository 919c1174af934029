"""Shared fixtures for the glomplib test-suite."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from glomplib.testing import create_fixture_tree


@pytest.fixture
def fixtures_dir(tmp_path) -> Path:
    """Absolute path of a freshly built canonical fixture tree."""
    return create_fixture_tree(tmp_path / "fixtures")
