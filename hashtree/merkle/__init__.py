"""
Merkle Tree

Builds a SHA-256 Merkle tree over ordered data blocks and exposes its
root and structure for integrity checks.

This module provides:
- MerkleTree, Leaf, Node: Immutable tree values
- build_tree: Hash blocks into leaves and assemble all internal nodes
- root_hash: Compute the root digest without building the tree
- get_node / root_node: Read-only queries over an assembled tree

Canonical Commitment Rules:
1. Leaf hashing: sha256(block), lowercase hex
2. Parent hashing: sha256(left_hex + right_hex)
3. Padding: Duplicate last item if odd, at the leaf level and every level above
4. Empty input: rejected by default (see RuntimeConfig.tree.empty_input_policy)
5. Single block: root = sha256(h + h) where h = sha256(block)

Usage:
    from hashtree.merkle import build_tree, root_hash, root_node, get_node

    tree = build_tree(["tx1", "tx2", "tx3"])
    root = root_node(tree)
    assert root.hash == root_hash(["tx1", "tx2", "tx3"])
"""
from .bucketing import (
    make_even,
    chunk,
    combine,
    bucket,
)

from .merkle_tree import (
    SAMPLE_TX_HASHES,
    Leaf,
    Node,
    MerkleTree,
    validate_blocks,
    add_leaves,
    add_nodes,
    build_tree,
    get_node,
    root_node,
    with_root_hash,
    levels,
    tree_depth,
)

from .root import root_hash


__all__ = [
    # Core types
    "Leaf",
    "Node",
    "MerkleTree",
    "SAMPLE_TX_HASHES",
    # Bucketing
    "make_even",
    "chunk",
    "combine",
    "bucket",
    # Construction
    "validate_blocks",
    "add_leaves",
    "add_nodes",
    "build_tree",
    "root_hash",
    # Queries
    "get_node",
    "root_node",
    "with_root_hash",
    "levels",
    "tree_depth",
]
