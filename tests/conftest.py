"""
Pytest Configuration and Shared Fixtures
=======================================

Both applications are built fresh per test so route registration and
startup work run every time.
"""

import pytest
from fastapi.testclient import TestClient

from turismo.api.server import get_app as get_api_app
from turismo.web.server import get_app as get_web_app


@pytest.fixture
def api_client():
    """Test client for the API stub."""
    with TestClient(get_api_app()) as client:
        yield client


@pytest.fixture
def web_client():
    """Test client for the landing page."""
    with TestClient(get_web_app()) as client:
        yield client
