# tests/conftest.py

from datetime import date

import pytest
from fastapi.testclient import TestClient

from profile_api.api.dependencies import get_today
from profile_api.core.config import Settings
from profile_api.main import create_app

FIXED_TODAY = date(2024, 1, 1)


@pytest.fixture
def settings() -> Settings:
    return Settings(json_logs=False, log_level="WARNING")


@pytest.fixture
def app(settings):
    application = create_app(settings)
    application.dependency_overrides[get_today] = lambda: FIXED_TODAY
    return application


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
