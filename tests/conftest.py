"""Pytest fixtures for the phonebook tests."""

import pytest
from fastapi.testclient import TestClient

from phonebook_api.app.main import create_app
from phonebook_api.app.services.person_service import PersonDirectory


@pytest.fixture
def directory():
    """Fresh directory holding the seed entries."""
    return PersonDirectory()


@pytest.fixture
def client(directory):
    """Test client for an app that serves ``directory``."""
    return TestClient(create_app(directory))
