"""
Root conftest: puts src on the path and keeps tests away from a developer's
real .env and data directory.
"""

import logging
import sys
from pathlib import Path

import pytest

# Ensure src on path
sys.path.insert(0, str(Path(__file__).parent / "src"))

logger = logging.getLogger(__name__)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Drop collector environment overrides for every test."""
    for var in (
        "ALCHEMY_API_KEY",
        "LOG_LEVEL",
        "GAS_TRACKER_DATA_DIR",
        "GAS_TRACKER_CONFIG_DIR",
    ):
        monkeypatch.delenv(var, raising=False)
