"""
Root-Hash Fast Path
Computes only the Merkle root digest, without building Leaf or Node
objects.

Equivalence Contract:
    root_hash(blocks) == root_node(build_tree(blocks)).hash
for every non-empty block sequence. Both paths share the same bucketing
and padding rules; see merkle_tree.py for the commitment rules.
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence

from hashtree.config.runtime import RuntimeConfig, get_default_config
from hashtree.crypto.hashing import Block, hash_hex
from hashtree.merkle.bucketing import bucket
from hashtree.merkle.merkle_tree import SAMPLE_TX_HASHES, validate_blocks

logger = logging.getLogger(__name__)


def _reduce(hashes: list[str], config: RuntimeConfig) -> str:
    """Bucket one level of digests and recurse until a single pair remains."""
    next_level = bucket(
        hashes,
        max_workers=config.tree.max_workers,
        parallel_threshold=config.tree.parallel_threshold,
    )
    if len(hashes) <= 2:
        return next_level[0]
    logger.debug("Fast path: %d digests -> %d", len(hashes), len(next_level))
    return _reduce(next_level, config)


def root_hash(
    data: Sequence[Block] = SAMPLE_TX_HASHES,
    config: Optional[RuntimeConfig] = None,
) -> str:
    """
    Compute the Merkle root digest of ordered blocks.

    Algorithm:
    1. Hash every block
    2. If two or fewer digests remain: return the aggregate of the pair
       (a single digest is paired with itself)
    3. Otherwise bucket the digests one level up and repeat

    Args:
        data: Ordered blocks (default: SAMPLE_TX_HASHES)
        config: Runtime config (default: process-wide default)

    Returns:
        64-character lowercase hex root digest. Under the "empty_hash"
        policy an empty input yields hash_hex("").

    Raises:
        InvalidInputException: See validate_blocks()

    Example:
        >>> from hashtree.crypto import hash_concat_hex
        >>> root_hash(["x"]) == hash_concat_hex(hash_hex("x"), hash_hex("x"))
        True
    """
    config = config or get_default_config()
    blocks = validate_blocks(data, config)
    if not blocks:
        return hash_hex(b"")

    return _reduce([hash_hex(block) for block in blocks], config)


__all__ = [
    "root_hash",
]
