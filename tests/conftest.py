"""
Pytest configuration and shared fixtures.

This module provides central pytest configuration, custom markers,
and shared fixtures for the appconsole test suite.
"""

import logging
from collections.abc import Generator
from unittest.mock import Mock

import pytest

from appconsole import ConsoleConfig, ConsoleService

# =============================================================================
# Plugin Registration
# =============================================================================

pytest_plugins = [
    "tests.fixtures.commands",
]


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, isolated, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (multiple components together)"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests (full system integration)"
    )
    config.addinivalue_line(
        "markers", "asyncio: Mark test as an async test (requires async runner)"
    )


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_logging_state() -> Generator[None, None, None]:
    """Remove loggers created by the package between tests."""
    yield
    for name in list(logging.root.manager.loggerDict.keys()):
        if name.startswith("/"):
            del logging.root.manager.loggerDict[name]


@pytest.fixture
def lg() -> Mock:
    """Provide a mock logger."""
    return Mock()


@pytest.fixture
def service(lg: Mock) -> ConsoleService:
    """Provide a console service with a mock logger."""
    return ConsoleService(config=ConsoleConfig(prog="prog"), lg=lg)
