"""
Runtime Configuration

Central configuration for tree construction: empty-input policy,
level-parallel hashing, and logging.
"""

from __future__ import annotations

import copy
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from hashtree.schemas.errors import ConfigurationException

load_dotenv()


EMPTY_INPUT_REJECT = "reject"
EMPTY_INPUT_EMPTY_HASH = "empty_hash"
EMPTY_INPUT_POLICIES = (EMPTY_INPUT_REJECT, EMPTY_INPUT_EMPTY_HASH)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class TreeConfig:
    """Configuration for tree construction."""
    empty_input_policy: str = EMPTY_INPUT_REJECT
    max_workers: int = 1
    parallel_threshold: int = 64

    def __post_init__(self):
        if self.empty_input_policy not in EMPTY_INPUT_POLICIES:
            raise ConfigurationException(
                f"Unknown empty input policy: {self.empty_input_policy!r}",
                field_path="tree.empty_input_policy",
                details={"allowed": list(EMPTY_INPUT_POLICIES)},
            )
        self.max_workers = _as_int(self.max_workers, "tree.max_workers")
        self.parallel_threshold = _as_int(self.parallel_threshold, "tree.parallel_threshold")
        if self.max_workers < 1:
            raise ConfigurationException(
                f"max_workers must be at least 1, got {self.max_workers}",
                field_path="tree.max_workers",
            )
        if self.parallel_threshold < 1:
            raise ConfigurationException(
                f"parallel_threshold must be at least 1, got {self.parallel_threshold}",
                field_path="tree.parallel_threshold",
            )


def _as_int(value: Any, field_path: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationException(
            f"Expected an integer, got {value!r}",
            field_path=field_path,
        ) from e


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration for hashtree.

    Can be loaded from:
    - Environment variables
    - YAML file
    - Programmatic construction
    """
    tree: TreeConfig = field(default_factory=TreeConfig)
    log_level: str = "INFO"
    extra: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationException(
                f"Unknown log level: {self.log_level!r}",
                field_path="log_level",
                details={"allowed": list(LOG_LEVELS)},
            )

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - HASHTREE_EMPTY_INPUT_POLICY: reject | empty_hash
        - HASHTREE_MAX_WORKERS: worker threads for per-level hashing
        - HASHTREE_PARALLEL_THRESHOLD: minimum pairs in a level before threads are used
        - HASHTREE_LOG_LEVEL: DEBUG | INFO | WARNING | ERROR
        """
        overrides: dict[str, Any] = {}

        if os.getenv("HASHTREE_EMPTY_INPUT_POLICY"):
            overrides.setdefault("tree", {})["empty_input_policy"] = (
                os.getenv("HASHTREE_EMPTY_INPUT_POLICY", "").strip().lower()
            )
        if os.getenv("HASHTREE_MAX_WORKERS"):
            overrides.setdefault("tree", {})["max_workers"] = os.getenv("HASHTREE_MAX_WORKERS")
        if os.getenv("HASHTREE_PARALLEL_THRESHOLD"):
            overrides.setdefault("tree", {})["parallel_threshold"] = (
                os.getenv("HASHTREE_PARALLEL_THRESHOLD")
            )

        if os.getenv("HASHTREE_LOG_LEVEL"):
            overrides["log_level"] = os.getenv("HASHTREE_LOG_LEVEL")

        return overrides

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """
        Load configuration purely from environment variables.

        Uses defaults for any values not specified in env vars.
        """
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a YAML file."""
        import yaml
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationException(
                f"Config file must contain a mapping, got {type(data).__name__}",
                details={"path": str(path)},
            )
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        tree_data = data.get("tree", {}) or {}
        if not isinstance(tree_data, dict):
            raise ConfigurationException(
                "'tree' section must be a mapping",
                field_path="tree",
            )
        try:
            tree = TreeConfig(**tree_data) if tree_data else TreeConfig()
        except TypeError as e:
            raise ConfigurationException(
                f"Invalid tree configuration: {e}",
                field_path="tree",
            ) from e

        return cls(
            tree=tree,
            log_level=data.get("log_level", "INFO"),
            extra=data.get("extra", {}),
        )

    def with_env_overrides(self) -> "RuntimeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        data = self.to_dict()
        data["tree"].update(overrides.get("tree", {}))
        if "log_level" in overrides:
            data["log_level"] = overrides["log_level"]
        data["extra"] = copy.deepcopy(self.extra)
        return RuntimeConfig.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "tree": {
                "empty_input_policy": self.tree.empty_input_policy,
                "max_workers": self.tree.max_workers,
                "parallel_threshold": self.tree.parallel_threshold,
            },
            "log_level": self.log_level,
            "extra": self.extra,
        }


# Global default configuration
_default_config: Optional[RuntimeConfig] = None


def get_default_config() -> RuntimeConfig:
    """Get the default runtime configuration."""
    global _default_config
    if _default_config is None:
        _default_config = RuntimeConfig.from_env()
    return _default_config


def set_default_config(config: Optional[RuntimeConfig]) -> None:
    """Set the default runtime configuration (None resets to env-derived defaults)."""
    global _default_config
    _default_config = config
