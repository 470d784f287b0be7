"""
Shared pytest fixtures for task backend tests.
"""
import os
from unittest.mock import MagicMock, patch

import pytest

from task_backend.application.services.auth_service import AuthService

from .fakes import InMemoryTaskRepository, InMemoryUserRepository


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_task_db",
        "JWT_SECRET_KEY": "test_secret_key_for_testing_only",
        "FRONTEND_URL": "http://localhost:4200",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 1440
    mock.frontend_url = "http://localhost:4200"
    mock.log_level = "INFO"

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("task_backend.core.config.get_settings", return_value=mock), patch(
        "task_backend.core.security.get_settings", return_value=mock
    ):
        yield mock


@pytest.fixture
def auth_service(mock_settings) -> AuthService:
    return AuthService()


@pytest.fixture
def task_repo() -> InMemoryTaskRepository:
    return InMemoryTaskRepository()


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()
