"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from kanobug.app import app
from kanobug.config import Settings, get_settings

TEST_VERIFICATION_TOKEN = "test_verification_token_1234"


@pytest.fixture
def settings() -> Settings:
    """Fully configured Settings, independent of the process environment."""
    return Settings(
        _env_file=None,
        slack_verification_token=TEST_VERIFICATION_TOKEN,
        slack_access_token="xoxb-test",
        region="us-west-1",
        table_name="kanobug-test",
        jira_api_host="example.atlassian.net",
        jira_api_user="bot@example.com",
        jira_api_token="jira-token",
    )


@pytest.fixture
def client(settings: Settings):
    """TestClient with the settings dependency pinned to the test settings."""
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()
