"""
Shared test configuration and fixtures
"""
import pytest
import os
from fastapi.testclient import TestClient

# Set test environment before importing app
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ.pop("MANAGEMENT_EXPOSED_ENDPOINTS", None)
os.environ.pop("MANAGEMENT_BASE_PATH", None)

from main import app


@pytest.fixture
def client():
    """Test client for the fully wired application"""
    with TestClient(app) as test_client:
        yield test_client
