"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from box_office.dependencies import get_session_store


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture(autouse=True)
def fresh_session_store():
    """Every test starts with an empty in-memory store."""
    get_session_store.cache_clear()
    yield
    get_session_store.cache_clear()
