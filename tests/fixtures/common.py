"""
Common test fixtures shared by all modules.

Provides:
- make_blocks: deterministic block sequences
- H: a direct hashlib reference hasher (independent of hashtree.crypto)
- expected_levels / expected_root: a straightforward reference
  construction used to cross-check the library
"""

import hashlib
from typing import Union


def H(data: Union[str, bytes]) -> str:
    """Reference SHA-256 lowercase hex digest."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return hashlib.sha256(data).hexdigest()


def make_blocks(count: int, prefix: str = "tx") -> list[str]:
    """Create count distinct text blocks: tx0, tx1, ..."""
    return [f"{prefix}{i}" for i in range(count)]


def expected_levels(blocks: list) -> list[list[str]]:
    """
    Reference level digests, bottom-up.

    Level 0 is the padded leaf level; every level above pairs adjacent
    digests, duplicating the last one when the count is odd.
    """
    padded = list(blocks)
    if len(padded) % 2 == 1:
        padded.append(padded[-1])
    level = [H(b) for b in padded]
    result = [level]
    while len(level) > 1:
        if len(level) % 2 == 1:
            level = level + [level[-1]]
        level = [H(level[i] + level[i + 1]) for i in range(0, len(level), 2)]
        result.append(level)
    return result


def expected_root(blocks: list) -> str:
    """Reference root digest."""
    return expected_levels(blocks)[-1][0]
