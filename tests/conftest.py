"""
Pytest configuration and shared fixtures for hashtree tests.

This conftest.py:
1. Adds project root and tests root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Configures pytest markers and settings
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

from hashtree.config import set_default_config  # noqa: E402
from hashtree.merkle import SAMPLE_TX_HASHES, build_tree  # noqa: E402


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

_CONFIG_ENV_VARS = (
    "HASHTREE_EMPTY_INPUT_POLICY",
    "HASHTREE_MAX_WORKERS",
    "HASHTREE_PARALLEL_THRESHOLD",
    "HASHTREE_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def reset_default_config(monkeypatch):
    """Isolate every test from HASHTREE_* env vars and the cached default config."""
    for name in _CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    set_default_config(None)
    yield
    set_default_config(None)


@pytest.fixture
def sample_blocks():
    """The built-in sample transaction ids."""
    return list(SAMPLE_TX_HASHES)


@pytest.fixture
def abc_tree():
    """Tree built from ["a", "b", "c"]."""
    return build_tree(["a", "b", "c"])


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
