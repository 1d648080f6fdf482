"""
hashtree

SHA-256 Merkle trees over ordered data blocks.

Usage:
    from hashtree import build_tree, root_hash
"""

from hashtree.merkle import (
    Leaf,
    MerkleTree,
    Node,
    SAMPLE_TX_HASHES,
    build_tree,
    get_node,
    root_hash,
    root_node,
)

__version__ = "0.1.0"

__all__ = [
    "Leaf",
    "MerkleTree",
    "Node",
    "SAMPLE_TX_HASHES",
    "build_tree",
    "get_node",
    "root_hash",
    "root_node",
]
