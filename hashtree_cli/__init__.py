"""
hashtree CLI

Command-line interface for building Merkle trees over data blocks.

Usage:
    python -m hashtree_cli root a b c
    python -m hashtree_cli tree --file blocks.txt --json
    python -m hashtree_cli node <hash> a b c
    python -m hashtree_cli config --show
"""

__version__ = "0.1.0"
