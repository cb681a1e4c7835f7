"""
Shared pytest fixtures for SInvoice mock tests.

This module provides common fixtures including:
- A static configuration provider with a cheap hashing work factor
- The FastAPI application and a TestClient bound to it
- Basic auth helpers for the seeded accounts
"""

import base64
import os
import sys

import pytest
from fastapi.testclient import TestClient

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sinvoice_mock.config import APIConfig, AuthConfig, StaticConfigProvider
from sinvoice_mock.main import create_app

API_ROOT = "/api/v1/InvoiceWS"
TEST_HASH_ITERATIONS = 1000

ADMIN = ("admin", "admin123")
USER = ("user", "user123")


def basic_header(username: str, password: str) -> dict:
    """Build an Authorization header for the given pair."""
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return {"Authorization": f"Basic {token}"}


def make_config_provider(api_root: str = API_ROOT) -> StaticConfigProvider:
    return StaticConfigProvider(
        APIConfig(
            host="127.0.0.1",
            port=8080,
            debug=False,
            log_level="INFO",
            api_root=api_root,
        ),
        AuthConfig(realm="SInvoice Mock", hash_iterations=TEST_HASH_ITERATIONS),
    )


@pytest.fixture
def config_provider():
    """Static configuration for tests."""
    return make_config_provider()


@pytest.fixture
def app(config_provider):
    """Fully wired application."""
    return create_app(config_provider)


@pytest.fixture
def client(app):
    """TestClient for the application."""
    return TestClient(app)


@pytest.fixture
def admin_headers():
    return basic_header(*ADMIN)


@pytest.fixture
def user_headers():
    return basic_header(*USER)
