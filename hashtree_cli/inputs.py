"""
CLI Block Input

Resolves the block sequence for a command from positional arguments,
a file (one block per line), or the built-in sample.
"""

from __future__ import annotations

from argparse import Namespace
from pathlib import Path

from hashtree.merkle import SAMPLE_TX_HASHES


def read_blocks_file(path: Path) -> list[str]:
    """
    Read one block per line.

    Every line is a block, blank and whitespace-only lines included, so a
    file hashes the same as passing its lines as arguments. Only the line
    terminator is removed.
    """
    with open(path, "r", encoding="utf-8") as f:
        return [line.rstrip("\n") for line in f]


def load_blocks(args: Namespace) -> list[str]:
    """
    Pick the blocks for a command.

    Positional blocks win over --file; with neither, the sample
    transaction ids are used.
    """
    if args.blocks:
        return list(args.blocks)
    if args.file:
        return read_blocks_file(Path(args.file))
    return list(SAMPLE_TX_HASHES)
