"""
Test configuration and fixtures
"""
import pytest
import os
import sys

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app
from config.paging import PagingSettings


@pytest.fixture
def paging_settings():
    """Paging defaults independent of the environment"""
    return PagingSettings()


@pytest.fixture
def app(paging_settings):
    """Create application for testing"""
    app = create_app(paging_settings=paging_settings)
    app.config.update({
        "TESTING": True,
    })

    # No app context is pushed here: each request context gets its own,
    # so flask.g starts empty for every request.
    return app


@pytest.fixture
def client(app):
    """Create test client"""
    return app.test_client()
