"""
Root pytest configuration and fixtures for httpsimp.

Provides in-memory responses for body-ownership assertions and a
session-backed client for tests that go through `responses`.
"""

from pathlib import Path
import sys

import pytest

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from httpsimp import SessionClient  # noqa: E402
from tests.utils.mocks import build_response  # noqa: E402


@pytest.fixture
def make_response():
    """Factory for unread responses: make_response(status_code, content_type, body)."""
    return build_response


@pytest.fixture
def base_url():
    """Test base URL."""
    return "https://api.example.com/v1"


@pytest.fixture
def client():
    with SessionClient(timeout=5) as c:
        yield c
