"""
Pair Bucketing
Adjacent pairing and per-pair aggregate hashing, shared by the tree
assembler and the root-hash fast path.

Padding Rule: if a sequence has an odd count, its last item is reused as
both members of the final pair. The duplicate is the same object, never
a new entity.

Aggregate hash of a pair (first, second):
    hash_concat_hex(first, second) == sha256((first + second).encode())

Pairs within one level are independent, so a level may be hashed on a
thread pool. Results are always collected in pairing order. Each pair
input is 128 bytes, below the size at which hashlib releases the GIL, so
the pool does not raise throughput for SHA-256 digests.
"""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Sequence, TypeVar

from hashtree.config.runtime import get_default_config
from hashtree.crypto.hashing import hash_concat_hex

logger = logging.getLogger(__name__)

T = TypeVar("T")


def make_even(items: Sequence[T]) -> list[T]:
    """
    Return items as a list with an even count.

    If the count is odd, the last item is appended a second time.
    An empty sequence stays empty.

    Example:
        >>> make_even(["a", "b", "c"])
        ['a', 'b', 'c', 'c']
    """
    result = list(items)
    if len(result) % 2 == 1:
        result.append(result[-1])
    return result


def chunk(items: Sequence[T]) -> list[tuple[T, T]]:
    """
    Split items into adjacent (first, second) pairs, padding if odd.

    Example:
        >>> chunk(["a", "b", "c"])
        [('a', 'b'), ('c', 'c')]
    """
    padded = make_even(items)
    return [(padded[i], padded[i + 1]) for i in range(0, len(padded), 2)]


def combine(first: str, second: str) -> str:
    """Aggregate hash of one pair of digests, in first-then-second order."""
    return hash_concat_hex(first, second)


def _combine_pair(pair: tuple[str, str]) -> str:
    return combine(pair[0], pair[1])


def bucket(
    hashes: Sequence[str],
    max_workers: Optional[int] = None,
    parallel_threshold: Optional[int] = None,
) -> list[str]:
    """
    Bucket a level of digests into the next level up.

    Args:
        hashes: Ordered digests of one level
        max_workers: Worker threads for hashing the pairs
            (default: from runtime config; 1 means sequential)
        parallel_threshold: Minimum number of pairs before threads are used
            (default: from runtime config)

    Returns:
        One aggregate digest per adjacent pair, in pairing order.
        An empty input yields an empty list.
    """
    if max_workers is None or parallel_threshold is None:
        tree_config = get_default_config().tree
        if max_workers is None:
            max_workers = tree_config.max_workers
        if parallel_threshold is None:
            parallel_threshold = tree_config.parallel_threshold

    pairs = chunk(hashes)

    if max_workers > 1 and len(pairs) >= parallel_threshold:
        logger.debug("Hashing %d pairs on %d workers", len(pairs), max_workers)
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            # map() preserves input order and waits for every pair
            return list(pool.map(_combine_pair, pairs))

    return [_combine_pair(pair) for pair in pairs]


__all__ = [
    "make_even",
    "chunk",
    "combine",
    "bucket",
]
