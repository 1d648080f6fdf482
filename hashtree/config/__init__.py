"""
Runtime Configuration Module

Provides configuration loading and management for hashtree.
"""

from .runtime import (
    EMPTY_INPUT_EMPTY_HASH,
    EMPTY_INPUT_POLICIES,
    EMPTY_INPUT_REJECT,
    RuntimeConfig,
    TreeConfig,
    get_default_config,
    set_default_config,
)

__all__ = [
    "EMPTY_INPUT_EMPTY_HASH",
    "EMPTY_INPUT_POLICIES",
    "EMPTY_INPUT_REJECT",
    "RuntimeConfig",
    "TreeConfig",
    "get_default_config",
    "set_default_config",
]
