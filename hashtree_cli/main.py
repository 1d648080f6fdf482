"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m hashtree_cli root [BLOCK ...] [--file PATH] [--json]
    python -m hashtree_cli tree [BLOCK ...] [--file PATH] [--json]
    python -m hashtree_cli node HASH [BLOCK ...] [--file PATH] [--json]
    python -m hashtree_cli config --show

With no blocks and no --file, the built-in sample transaction ids are used.

Environment Variables:
    HASHTREE_EMPTY_INPUT_POLICY   reject | empty_hash (default: reject)
    HASHTREE_MAX_WORKERS          Worker threads per tree level (default: 1)
    HASHTREE_PARALLEL_THRESHOLD   Pairs per level before threads are used (default: 64)
    HASHTREE_LOG_LEVEL            Log level (default: INFO)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from hashtree.config import RuntimeConfig, set_default_config
from hashtree_cli import __version__
from hashtree_cli.commands import root, tree


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )


def load_config(path: Path | None) -> RuntimeConfig:
    """Load config from a YAML file (if given), then overlay HASHTREE_* env vars."""
    if path is None:
        return RuntimeConfig.from_env()
    return RuntimeConfig.from_yaml(path).with_env_overrides()


def _add_block_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "blocks",
        nargs="*",
        help="Data blocks in order (default: sample transaction ids)",
    )
    parser.add_argument(
        "--file", "-f",
        type=str,
        default=None,
        help="Read blocks from a file, one per line",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="hashtree",
        description="Build SHA-256 Merkle trees over ordered data blocks.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to a YAML configuration file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Also write logs to this file",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Print tracebacks for unexpected errors",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- root command ---
    root_parser = subparsers.add_parser(
        "root",
        help="Print the Merkle root of the blocks",
        description="Compute the root digest without building the full tree.",
    )
    _add_block_arguments(root_parser)
    root_parser.set_defaults(func=root.root_cmd)

    # --- tree command ---
    tree_parser = subparsers.add_parser(
        "tree",
        help="Build the full tree and print a summary",
        description="Build every leaf and node and print digests per level.",
    )
    _add_block_arguments(tree_parser)
    tree_parser.set_defaults(func=tree.tree_cmd)

    # --- node command ---
    node_parser = subparsers.add_parser(
        "node",
        help="Look up an internal node by hash",
        description="Build the tree and print the internal node with the given hash.",
    )
    node_parser.add_argument("hash", type=str, help="Node digest to look up")
    _add_block_arguments(node_parser)
    node_parser.set_defaults(func=tree.node_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Show the effective configuration",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Show current configuration",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    if args.show:
        print(json.dumps(args.runtime_config.to_dict(), indent=2))
        return EXIT_SUCCESS

    print("Usage: hashtree config --show")
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 2=node not found)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    # Load configuration
    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    # Setup logging
    log_level = args.log_level or config.log_level
    setup_logging(level=log_level, log_file=args.log_file)

    set_default_config(config)
    args.runtime_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if args.debug:
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
