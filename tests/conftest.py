"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import pytest

from tests import create_test_engine, teardown_test_database


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as requiring database (deselect with '-m \"not db\"')"
    )


@pytest.fixture
def test_engine():
    """Function-scoped engine with a fresh schema."""
    engine = create_test_engine()
    yield engine
    teardown_test_database(engine)
