"""
Merkle Tree Construction
Leaf building, level-by-level assembly, and read-only queries over an
assembled tree.

Canonical Commitment Rules (Hard Contracts):
1. Leaf hashing: leaf.hash = sha256(block) as lowercase hex
2. Parent hashing: node.hash = sha256(left.hash + right.hash), hex text
   concatenated left-then-right with no separator
3. Leaf padding: an odd number of blocks gets its last block appended
   once more before leaves are built, so the leaf count is always even
4. Level padding: an odd frontier reuses its last node as both children
   of the final parent (Node.duplicated is set)
5. Empty input: governed by RuntimeConfig.tree.empty_input_policy

Ordering Notes:
- MerkleTree.leaves and MerkleTree.nodes are most-recently-added first,
  so nodes[0] is the root once assembly completes
- Pairing always follows input order; this module never sorts
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Optional, Sequence, Union

from hashtree.config.runtime import (
    EMPTY_INPUT_REJECT,
    RuntimeConfig,
    get_default_config,
)
from hashtree.crypto.hashing import Block, hash_hex
from hashtree.merkle.bucketing import bucket, chunk, make_even
from hashtree.schemas.errors import (
    InvalidInputException,
    StructuralPreconditionException,
)
from hashtree.schemas.tree import TreeSummary

logger = logging.getLogger(__name__)


# Transaction ids from a bitcoin block, used when no blocks are supplied
SAMPLE_TX_HASHES: tuple[str, ...] = (
    "f2287f17a4fa232dca5715c24a92f7112402a8101b9a7b276fb8c8f617376b90",
    "bb5ee510a4fda29cae30c97e7eee80569d3ec3598465f2d7e0674c395e0256e9",
    "647ab8c84365620d60f2523505d14bd230b5e650c96dee48be47770063ee7461",
    "34b06018fcc33ba6ebb01198d785b0629fbdc5d1948f688059158f053093f08b",
    "ff58b258dab0d7f36a2908e6c75229ce308d34806289c912a1a5f39a5aa71f9f",
    "232fc124803668a9f23b1c3bcb1134274303f5c0e1b0e27c9b6c7db59f0e2a4d",
    "27a0797cc5b042ba4c11e72a9555d13a67f00161550b32ede0511718b22dbc2c",
)


@dataclass(frozen=True)
class Leaf:
    """
    A level-0 tree entry holding one hashed input block.

    Attributes:
        hash: Digest of the raw block
        value: The original block
        level: Always 0
    """
    hash: str
    value: Block
    level: int = 0


@dataclass(frozen=True)
class Node:
    """
    An internal tree vertex.

    Attributes:
        hash: Digest of left.hash + right.hash
        left: Left child (Leaf or Node from the level below)
        right: Right child; the same object as left when duplicated
        level: One greater than the children's level
        duplicated: True when right is a self-duplicate of left rather
            than a true sibling (odd frontier)
    """
    hash: str
    left: Union[Leaf, "Node"] = field(repr=False)
    right: Union[Leaf, "Node"] = field(repr=False)
    level: int = 1
    duplicated: bool = False


@dataclass(frozen=True)
class MerkleTree:
    """
    An assembled (or partially assembled) Merkle tree.

    Trees are immutable values: every construction step returns a new
    tree and never mutates the previous one.

    Attributes:
        root_hash: Only set by with_root_hash(); assembly leaves it None
        nodes: Internal nodes across all levels, most-recently-added first
        leaves: Leaves, most-recently-added first
    """
    root_hash: Optional[str] = None
    nodes: tuple[Node, ...] = ()
    leaves: tuple[Leaf, ...] = ()

    def summary(self) -> TreeSummary:
        """Build a display summary of this tree."""
        tree_levels = levels(self)
        return TreeSummary(
            root_hash=self.nodes[0].hash if self.nodes else None,
            leaf_count=len(self.leaves),
            node_count=len(self.nodes),
            depth=len(tree_levels),
            levels=[[item.hash for item in level] for level in tree_levels],
        )


def validate_blocks(
    data: Sequence[Block],
    config: Optional[RuntimeConfig] = None,
) -> list[Block]:
    """
    Check a block sequence before hashing.

    Args:
        data: Ordered blocks
        config: Runtime config (default: process-wide default)

    Returns:
        The blocks as a list

    Raises:
        InvalidInputException: If data is a bare str/bytes rather than a
            sequence of blocks, or is empty under the "reject" policy
    """
    if isinstance(data, (str, bytes, bytearray)):
        raise InvalidInputException(
            "Expected a sequence of blocks, got a single "
            f"{type(data).__name__}",
            details={"type": type(data).__name__},
        )
    blocks = list(data)
    if not blocks:
        config = config or get_default_config()
        if config.tree.empty_input_policy == EMPTY_INPUT_REJECT:
            raise InvalidInputException(
                "Cannot build a Merkle tree from an empty block sequence",
                details={"empty_input_policy": config.tree.empty_input_policy},
            )
    return blocks


def add_leaves(
    data: Sequence[Block],
    config: Optional[RuntimeConfig] = None,
) -> MerkleTree:
    """
    Hash each block into a Leaf of a new tree.

    If the block count is odd, the last block is added a second time so
    the leaf count is always even.

    Args:
        data: Ordered blocks
        config: Runtime config (default: process-wide default)

    Returns:
        New tree holding only leaves, most-recently-added first

    Raises:
        InvalidInputException: See validate_blocks()
    """
    blocks = make_even(validate_blocks(data, config))
    new_leaves = [Leaf(hash=hash_hex(block), value=block) for block in blocks]
    return MerkleTree(leaves=tuple(reversed(new_leaves)))


def _highest_level_nodes(tree: MerkleTree) -> list[Node]:
    """Nodes sharing the maximum level, in creation (left-to-right) order."""
    top_level = tree.nodes[0].level
    return [node for node in reversed(tree.nodes) if node.level == top_level]


def _add_level(
    tree: MerkleTree,
    frontier: Sequence[Union[Leaf, Node]],
    config: RuntimeConfig,
) -> MerkleTree:
    pairs = chunk(frontier)
    hashes = bucket(
        [item.hash for item in frontier],
        max_workers=config.tree.max_workers,
        parallel_threshold=config.tree.parallel_threshold,
    )

    new_nodes = [
        Node(
            hash=digest,
            left=left,
            right=right,
            level=left.level + 1,
            duplicated=left is right,
        )
        for (left, right), digest in zip(pairs, hashes)
    ]
    logger.debug(
        "Level %d: %d nodes from %d children",
        new_nodes[0].level, len(new_nodes), len(frontier),
    )
    return replace(tree, nodes=tuple(reversed(new_nodes)) + tree.nodes)


def add_nodes(
    tree: MerkleTree,
    config: Optional[RuntimeConfig] = None,
) -> MerkleTree:
    """
    Assemble internal nodes level by level until one root remains.

    Algorithm:
    1. Frontier = leaves in input order (if no nodes exist yet)
    2. Pair the frontier and create one parent Node per pair
    3. Frontier = all nodes at the highest level now present
    4. Stop once the frontier holds exactly one node (the root)

    Args:
        tree: Tree with leaves
        config: Runtime config (default: process-wide default)

    Returns:
        New tree with all internal nodes; nodes[0] is the root.
        A tree without leaves is returned unchanged.
    """
    config = config or get_default_config()

    if not tree.nodes:
        if not tree.leaves:
            logger.debug("No leaves to assemble")
            return tree
        tree = _add_level(tree, list(reversed(tree.leaves)), config)

    frontier = _highest_level_nodes(tree)
    while len(frontier) > 1:
        tree = _add_level(tree, frontier, config)
        frontier = _highest_level_nodes(tree)

    return tree


def build_tree(
    data: Sequence[Block] = SAMPLE_TX_HASHES,
    config: Optional[RuntimeConfig] = None,
) -> MerkleTree:
    """
    Build a complete Merkle tree from ordered blocks.

    Args:
        data: Ordered blocks (default: SAMPLE_TX_HASHES)
        config: Runtime config (default: process-wide default)

    Returns:
        Assembled tree; root_node(tree) is its root

    Raises:
        InvalidInputException: See validate_blocks()

    Example:
        >>> tree = build_tree(["a", "b", "c"])
        >>> len(tree.leaves), len(tree.nodes)
        (4, 3)
    """
    config = config or get_default_config()
    tree = add_nodes(add_leaves(data, config=config), config=config)
    logger.debug(
        "Built tree: %d leaves, %d nodes", len(tree.leaves), len(tree.nodes)
    )
    return tree


def get_node(tree: MerkleTree, node_hash: str) -> Optional[Node]:
    """
    Find the first internal node whose hash equals node_hash.

    Returns:
        The matching Node, or None if no node matches
    """
    for node in tree.nodes:
        if node.hash == node_hash:
            return node
    return None


def root_node(tree: MerkleTree) -> Node:
    """
    Return the root node of an assembled tree.

    Raises:
        StructuralPreconditionException: If the tree has no internal nodes
    """
    if not tree.nodes:
        raise StructuralPreconditionException(
            "Tree has no internal nodes; build it with add_nodes() first",
            node_count=0,
            details={"leaf_count": len(tree.leaves)},
        )
    return tree.nodes[0]


def with_root_hash(tree: MerkleTree) -> MerkleTree:
    """Return a copy of the tree with root_hash populated from its root node."""
    return replace(tree, root_hash=root_node(tree).hash)


def levels(tree: MerkleTree) -> list[list[Union[Leaf, Node]]]:
    """
    Group the tree bottom-up by level.

    Returns:
        levels[0] holds the leaves, levels[k] the nodes at level k,
        each in creation (left-to-right) order. Empty for an empty tree.
    """
    result: list[list[Union[Leaf, Node]]] = []
    if tree.leaves:
        result.append(list(reversed(tree.leaves)))
    for node in reversed(tree.nodes):
        while len(result) <= node.level:
            result.append([])
        result[node.level].append(node)
    return result


def tree_depth(num_blocks: int) -> int:
    """
    Number of levels (leaf level included) for a tree of num_blocks blocks.

    Equals ceil(log2(n')) + 1 where n' is num_blocks rounded up to even.
    An empty input has depth 0.
    """
    if num_blocks < 0:
        raise ValueError(f"num_blocks must be non-negative, got {num_blocks}")
    if num_blocks == 0:
        return 0
    padded = num_blocks + num_blocks % 2
    return (padded - 1).bit_length() + 1


__all__ = [
    "SAMPLE_TX_HASHES",
    "Leaf",
    "Node",
    "MerkleTree",
    "validate_blocks",
    "add_leaves",
    "add_nodes",
    "build_tree",
    "get_node",
    "root_node",
    "with_root_hash",
    "levels",
    "tree_depth",
]
