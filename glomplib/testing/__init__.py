"""Testing utilities for glomplib consumers."""

from .fixtures import FIXTURE_FILES, create_fixture_tree, make_relative

__all__ = ['FIXTURE_FILES', 'create_fixture_tree', 'make_relative']
