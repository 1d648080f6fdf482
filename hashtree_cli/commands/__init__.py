"""
CLI command modules.
"""

from hashtree_cli.commands import root, tree

__all__ = ["root", "tree"]
