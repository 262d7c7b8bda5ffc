"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For shared sample data, see tests/__init__.py
"""

import pytest


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "api: marks tests that exercise the FastAPI app (deselect with '-m \"not api\"')"
    )


@pytest.fixture(autouse=True)
def reset_cached_services():
    """Drop cached config/services so env overrides in one test don't leak into another."""
    from web.backend.config import get_config
    from web.backend.services.generate_service import get_generate_service

    get_config.cache_clear()
    get_generate_service.cache_clear()
    yield
    get_config.cache_clear()
    get_generate_service.cache_clear()
