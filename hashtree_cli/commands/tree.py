"""
CLI Tree and Node Commands

Build the full tree and either summarize it or look up one node.

Usage:
    hashtree tree a b c [--json]
    hashtree node <hash> a b c [--json]
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace

from hashtree.merkle import MerkleTree, Node, build_tree, get_node
from hashtree.schemas.errors import HashTreeException
from hashtree.schemas.tree import TreeSummary
from hashtree_cli.inputs import load_blocks

logger = logging.getLogger(__name__)

# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_NOT_FOUND = 2


def _build(args: Namespace) -> MerkleTree | None:
    try:
        return build_tree(load_blocks(args))
    except (HashTreeException, OSError) as e:
        logger.debug("tree build failed", exc_info=True)
        if args.json and isinstance(e, HashTreeException):
            print(json.dumps({"error": e.to_error_model().model_dump()}, indent=2))
        else:
            print(f"Error: {e}", file=sys.stderr)
        return None


def print_summary_human(summary: TreeSummary) -> None:
    """Print summary in human-readable format."""
    print(f"root_hash: {summary.root_hash or '(none)'}")
    print(f"leaves: {summary.leaf_count}")
    print(f"nodes: {summary.node_count}")
    print(f"depth: {summary.depth}")
    for level, hashes in enumerate(summary.levels):
        print(f"level {level}:")
        for digest in hashes:
            print(f"  {digest}")


def tree_cmd(args: Namespace) -> int:
    """Execute the tree command."""
    tree = _build(args)
    if tree is None:
        return EXIT_RUNTIME_ERROR

    summary = tree.summary()
    if args.json:
        print(json.dumps(summary.model_dump(), indent=2))
    else:
        print_summary_human(summary)
    return EXIT_SUCCESS


def node_to_dict(node: Node) -> dict:
    """Digest-level view of one node and its children."""
    return {
        "hash": node.hash,
        "level": node.level,
        "left": node.left.hash,
        "right": node.right.hash,
        "duplicated": node.duplicated,
    }


def node_cmd(args: Namespace) -> int:
    """Execute the node command."""
    tree = _build(args)
    if tree is None:
        return EXIT_RUNTIME_ERROR

    node = get_node(tree, args.hash.lower())
    if node is None:
        if args.json:
            print(json.dumps({"found": False, "hash": args.hash}, indent=2))
        else:
            print(f"Node not found: {args.hash}", file=sys.stderr)
        return EXIT_NOT_FOUND

    if args.json:
        print(json.dumps({"found": True, "node": node_to_dict(node)}, indent=2))
    else:
        for key, value in node_to_dict(node).items():
            print(f"{key}: {value}")
    return EXIT_SUCCESS
