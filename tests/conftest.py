"""Shared pytest configuration and fixtures for all tests."""

import json
import logging
from pathlib import Path

import pytest

from shortlinks.api.config.ShortlinksConfig import ShortlinksConfig
from shortlinks.api.scan.Context import Context


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external resources")
    config.addinivalue_line("markers", "config: configuration loading tests")


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict() -> dict:
    """Minimal valid shortlinks configuration dict for testing."""
    return {
        "context": {
            "owner": "rnystrom",
            "repo": "GitHawk",
        },
        "scan": {
            "overflow": "reject",
        },
        "log": {
            "level": "INFO",
        },
    }


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture() -> dict:
    """Pytest fixture returning a copy of the minimal config dict."""
    return minimal_config_dict()


@pytest.fixture
def context() -> Context:
    """The default context used by the shortlink suites."""
    return Context(owner="rnystrom", repo="GitHawk")


@pytest.fixture
def shortlinks_home(tmp_path: Path, monkeypatch, minimal_config_dict: dict) -> Path:
    """Set up SHORTLINKS_HOME with a minimal config file.

    Returns:
        Path to the shortlinks home directory (tmp_path)
    """
    monkeypatch.setenv("SHORTLINKS_HOME", str(tmp_path))
    (tmp_path / "config.json").write_text(json.dumps(minimal_config_dict))
    return tmp_path


@pytest.fixture
def empty_home(tmp_path: Path, monkeypatch) -> Path:
    """SHORTLINKS_HOME pointing at a directory without a config file."""
    monkeypatch.setenv("SHORTLINKS_HOME", str(tmp_path))
    return tmp_path


@pytest.fixture
def loaded_config(shortlinks_home: Path) -> ShortlinksConfig:
    return ShortlinksConfig.load()


@pytest.fixture(name="run_cmd")
def run_cmd_fixture():
    """Pytest fixture exposing run_cmd to test modules."""
    return run_cmd


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo handlers and level that setup_logging puts on the shortlinks logger."""
    logger = logging.getLogger("shortlinks")
    saved_handlers = logger.handlers[:]
    saved_level = logger.level
    yield logger
    for handler in logger.handlers:
        if handler not in saved_handlers:
            handler.close()
    logger.handlers = saved_handlers
    logger.setLevel(saved_level)
