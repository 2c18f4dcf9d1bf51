"""Pytest configuration for integration tests."""

from __future__ import annotations

import pytest


def pytest_configure(config: pytest.Config) -> None:
    """Register integration test marker."""
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (runs the game as a subprocess)",
    )
