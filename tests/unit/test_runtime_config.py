"""
Runtime Configuration Unit Tests
Tests for hashtree/config/runtime.py
"""
import pytest

from hashtree.config import (
    EMPTY_INPUT_EMPTY_HASH,
    EMPTY_INPUT_REJECT,
    RuntimeConfig,
    TreeConfig,
    get_default_config,
    set_default_config,
)
from hashtree.schemas.errors import ConfigurationException


class TestDefaults:
    """Default values."""

    def test_defaults(self):
        config = RuntimeConfig()

        assert config.tree.empty_input_policy == EMPTY_INPUT_REJECT
        assert config.tree.max_workers == 1
        assert config.tree.parallel_threshold == 64
        assert config.log_level == "INFO"

    def test_default_config_cached(self):
        assert get_default_config() is get_default_config()

    def test_set_default_config(self):
        config = RuntimeConfig(log_level="DEBUG")
        set_default_config(config)

        assert get_default_config() is config


class TestValidation:
    """Invalid values raise ConfigurationException."""

    def test_unknown_policy(self):
        with pytest.raises(ConfigurationException) as exc_info:
            TreeConfig(empty_input_policy="guess")

        assert exc_info.value.details["field_path"] == "tree.empty_input_policy"

    @pytest.mark.parametrize("value", [0, -1])
    def test_max_workers_below_one(self, value):
        with pytest.raises(ConfigurationException):
            TreeConfig(max_workers=value)

    def test_parallel_threshold_below_one(self):
        with pytest.raises(ConfigurationException):
            TreeConfig(parallel_threshold=0)

    def test_non_integer_workers(self):
        with pytest.raises(ConfigurationException):
            TreeConfig(max_workers="many")

    def test_unknown_log_level(self):
        with pytest.raises(ConfigurationException):
            RuntimeConfig(log_level="LOUD")

    def test_log_level_normalized(self):
        assert RuntimeConfig(log_level="debug").log_level == "DEBUG"

    def test_unknown_tree_key(self):
        with pytest.raises(ConfigurationException):
            RuntimeConfig.from_dict({"tree": {"rounds": 2}})


class TestFromSources:
    """Loading from dict, env and YAML."""

    def test_from_dict_partial(self):
        config = RuntimeConfig.from_dict({"tree": {"max_workers": 4}})

        assert config.tree.max_workers == 4
        assert config.tree.parallel_threshold == 64

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("HASHTREE_EMPTY_INPUT_POLICY", "EMPTY_HASH")
        monkeypatch.setenv("HASHTREE_MAX_WORKERS", "3")
        monkeypatch.setenv("HASHTREE_PARALLEL_THRESHOLD", "8")
        monkeypatch.setenv("HASHTREE_LOG_LEVEL", "warning")

        config = RuntimeConfig.from_env()

        assert config.tree.empty_input_policy == EMPTY_INPUT_EMPTY_HASH
        assert config.tree.max_workers == 3
        assert config.tree.parallel_threshold == 8
        assert config.log_level == "WARNING"

    def test_default_config_reads_env(self, monkeypatch):
        monkeypatch.setenv("HASHTREE_MAX_WORKERS", "2")
        set_default_config(None)

        assert get_default_config().tree.max_workers == 2

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "hashtree.yaml"
        path.write_text(
            "tree:\n"
            "  empty_input_policy: empty_hash\n"
            "  max_workers: 2\n"
            "log_level: DEBUG\n"
        )

        config = RuntimeConfig.from_yaml(path)

        assert config.tree.empty_input_policy == EMPTY_INPUT_EMPTY_HASH
        assert config.tree.max_workers == 2
        assert config.log_level == "DEBUG"

    def test_from_yaml_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert RuntimeConfig.from_yaml(path).to_dict() == RuntimeConfig().to_dict()

    def test_from_yaml_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            RuntimeConfig.from_yaml(tmp_path / "missing.yaml")

    def test_from_yaml_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigurationException):
            RuntimeConfig.from_yaml(path)

    def test_with_env_overrides(self, monkeypatch):
        base = RuntimeConfig.from_dict({"tree": {"max_workers": 2}, "extra": {"k": "v"}})
        monkeypatch.setenv("HASHTREE_PARALLEL_THRESHOLD", "5")

        config = base.with_env_overrides()

        assert config.tree.max_workers == 2
        assert config.tree.parallel_threshold == 5
        assert config.extra == {"k": "v"}
        assert base.tree.parallel_threshold == 64

    def test_with_env_overrides_noop(self):
        base = RuntimeConfig()

        assert base.with_env_overrides() is base

    def test_to_dict_round_trip(self):
        config = RuntimeConfig.from_dict(
            {"tree": {"empty_input_policy": "empty_hash", "max_workers": 3}, "log_level": "ERROR"}
        )

        assert RuntimeConfig.from_dict(config.to_dict()) == config
