"""
Pytest configuration and fixtures.
"""

import logging
from pathlib import Path

import pytest


CONFIGS_DIR = Path(__file__).parent / "configs"


@pytest.fixture
def configs_dir() -> Path:
    """Directory holding the fixture nginx configs."""
    return CONFIGS_DIR


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    """Path for a scratch config file."""
    return tmp_path / "nginx.conf"


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by setup_logging() during a test."""
    yield
    logger = logging.getLogger("ngxlex")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
