"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import random
import sys
from pathlib import Path

import pytest
from loguru import logger

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from mental_arithmetic.config import get_settings  # noqa: E402
from mental_arithmetic.core.formulas import FORMULAS  # noqa: E402


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")
    config.addinivalue_line("markers", "slow: Slow tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


@pytest.fixture
def rng():
    """Seeded random source so generator tests are reproducible."""
    return random.Random(20240917)


@pytest.fixture
def all_formulas():
    """Every catalog entry, in catalog order."""
    return list(FORMULAS.values())


@pytest.fixture
def fresh_settings(monkeypatch):
    """
    Clear the cached settings around a test.

    Use with monkeypatch.setenv to exercise MENTAL_ARITH_* overrides.
    """
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


@pytest.fixture
def warnings_sink():
    """
    Collect loguru WARNING messages emitted during a test.

    The package mutes its logger on import, so it is unmuted for the test
    and muted again afterwards.
    """
    messages = []
    logger.enable("mental_arithmetic")
    handler_id = logger.add(lambda message: messages.append(str(message)), level="WARNING")
    yield messages
    logger.remove(handler_id)
    logger.disable("mental_arithmetic")
