"""
Shared pytest fixtures.

The project uses a flat layout, so the repository root is put on sys.path
for runs that don't install the package first.
"""

import os
import sys

import pytest

_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if _ROOT not in sys.path:
    sys.path.insert(0, _ROOT)

from tree import BinarySearchTree, compute_layout, coordinates  # noqa: E402

SAMPLE_VALUES = [15, 6, 23, 4, 7, 20, 50]


@pytest.fixture
def sample_tree() -> BinarySearchTree:
    """The perfect seven-node tree used throughout the examples."""
    return BinarySearchTree.from_values(SAMPLE_VALUES)


@pytest.fixture
def coords(sample_tree):
    return coordinates(compute_layout(sample_tree))
