"""Shared fixtures for description tool tests."""

import pytest
from fastapi.testclient import TestClient

from description_tool.config import Settings
from description_tool.server import create_app


@pytest.fixture
def dewalt_attributes():
    return [
        "Brand: DEWALT",
        "Battery Voltage (V): 20",
        "Capacity: 28 oz.",
        "Cordless / Corded: Cordless",
    ]


@pytest.fixture
def settings():
    return Settings(strategy="natural", debug=False)


@pytest.fixture
def client(settings):
    """Test client for an app built from the test settings."""
    return TestClient(create_app(settings))


@pytest.fixture
def markdown_client():
    return TestClient(create_app(Settings(strategy="markdown")))
