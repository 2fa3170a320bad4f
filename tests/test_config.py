"""Tests for environment-driven settings."""

import pytest

from kanobug.config import Settings, get_settings


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults(monkeypatch: pytest.MonkeyPatch):
    """Unset options fall back to the deployment defaults."""
    for name in ("REGION", "TABLE_NAME", "JIRA_PROJECT_KEY", "RECORD_TTL_DAYS"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.region == "us-west-1"
    assert settings.table_name == "kanome-kanobug-db-tracker"
    assert settings.jira_project_key == "IQ"
    assert settings.record_ttl_days == 7


def test_reads_environment(monkeypatch: pytest.MonkeyPatch):
    """Options are read case-insensitively from the environment."""
    monkeypatch.setenv("SLACK_VERIFICATION_TOKEN", "from-env")
    monkeypatch.setenv("TABLE_NAME", "bugs")
    monkeypatch.setenv("JIRA_API_HOST", "acme.atlassian.net")
    monkeypatch.setenv("RECORD_TTL_DAYS", "3")
    settings = Settings(_env_file=None)
    assert settings.slack_verification_token == "from-env"
    assert settings.table_name == "bugs"
    assert settings.jira_api_host == "acme.atlassian.net"
    assert settings.record_ttl_days == 3


def test_get_settings_is_cached():
    """get_settings returns the same instance until the cache is cleared."""
    assert get_settings() is get_settings()


def test_blank_endpoint_url_is_unset(monkeypatch: pytest.MonkeyPatch):
    """An empty DYNAMODB_ENDPOINT_URL means no endpoint override."""
    monkeypatch.setenv("DYNAMODB_ENDPOINT_URL", "")
    assert Settings(_env_file=None).dynamodb_endpoint_url is None


def test_endpoint_url_kept(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("DYNAMODB_ENDPOINT_URL", "http://localhost:8000")
    assert Settings(_env_file=None).dynamodb_endpoint_url == "http://localhost:8000"
