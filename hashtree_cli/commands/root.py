"""
CLI Root Command

Print the Merkle root of a block sequence using the fast path.

Usage:
    hashtree root a b c
    hashtree root --file blocks.txt --json
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace

from hashtree.merkle import root_hash
from hashtree.schemas.errors import HashTreeException
from hashtree_cli.inputs import load_blocks

logger = logging.getLogger(__name__)

# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1


def root_cmd(args: Namespace) -> int:
    """
    Execute the root command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code
    """
    try:
        blocks = load_blocks(args)
        digest = root_hash(blocks)
    except (HashTreeException, OSError) as e:
        logger.debug("root command failed", exc_info=True)
        if args.json and isinstance(e, HashTreeException):
            print(json.dumps({"error": e.to_error_model().model_dump()}, indent=2))
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    if args.json:
        print(json.dumps({"root_hash": digest, "block_count": len(blocks)}, indent=2))
    else:
        print(digest)
    return EXIT_SUCCESS
