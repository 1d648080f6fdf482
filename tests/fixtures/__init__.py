"""
Test fixtures package for hashtree tests.

This package provides factory functions for creating test inputs.
- common.py: Block factories and hand-computed reference digests

Usage:
    from fixtures import make_blocks, expected_root

    def test_something():
        blocks = make_blocks(5)
        assert root_hash(blocks) == expected_root(blocks)
"""

from .common import (
    H,
    make_blocks,
    expected_levels,
    expected_root,
)

__all__ = [
    "H",
    "make_blocks",
    "expected_levels",
    "expected_root",
]
