# tests/conftest.py

"""Pytest configuration and fixtures for test suite"""

# Standard library imports
from collections.abc import Callable
from json import dumps
from logging import Logger
from logging import getLogger
from pathlib import Path

# Third party imports
import pytest

# Local imports
from hebrew_pattern_tool.infrastructure.config import ConfigLoader
from tests.fixtures.wordlists import FakeFetcher


# Custom markers
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "slow: mark test as slow running")


@pytest.fixture(autouse=True, scope="function")
def basic_isolation():
    """Minimal isolation for most tests - just reset logging"""
    # Reset logging to avoid handler conflicts
    root_logger = getLogger()
    # Remove all handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    # Reset logging level
    root_logger.setLevel(30)  # WARNING level

    # Clear all logger instances
    Logger.manager.loggerDict.clear()

    yield


@pytest.fixture
def make_config(tmp_path: Path) -> Callable[..., ConfigLoader]:
    """Build a ConfigLoader from section overrides written to a temporary config.json"""

    def _make(**sections: dict) -> ConfigLoader:
        config_path = tmp_path / "config.json"
        config_path.write_text(dumps(sections, ensure_ascii=False), encoding="utf-8")
        return ConfigLoader(str(config_path))

    return _make


@pytest.fixture
def wordlist_dir(tmp_path: Path) -> Path:
    """Directory holding the built-in word list files"""
    directory = tmp_path / "wordlists"
    directory.mkdir()
    return directory


@pytest.fixture
def fake_fetcher() -> FakeFetcher:
    """In-memory fetcher with no registered texts"""
    return FakeFetcher()
