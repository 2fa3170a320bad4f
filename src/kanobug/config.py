"""Application configuration via pydantic-settings."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Slack
    slack_verification_token: str = ""
    slack_access_token: str = ""

    # DynamoDB
    region: str = "us-west-1"
    table_name: str = "kanome-kanobug-db-tracker"
    dynamodb_endpoint_url: str | None = None
    record_ttl_days: int = 7

    # Jira
    jira_api_host: str = ""
    jira_api_user: str = ""
    jira_api_token: str = ""
    jira_project_key: str = "IQ"

    # App
    environment: str = "development"
    log_level: str = "INFO"
    port: int = 8080

    @field_validator("dynamodb_endpoint_url", mode="before")
    @classmethod
    def _blank_endpoint_is_unset(cls, value: str | None) -> str | None:
        """Treat an empty DYNAMODB_ENDPOINT_URL as no override."""
        if isinstance(value, str) and not value.strip():
            return None
        return value


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings. Lazy initialization to avoid import-time errors."""
    return Settings()
