"""Async Slack client factory.

Builds an AsyncWebClient from the settings passed in, once per call, so no
client or token outlives the request that used it. Slack retries are
disabled: every call is a single attempt.
"""

from slack_sdk.web.async_client import AsyncWebClient

from kanobug.config import Settings


def build_slack_client(settings: Settings) -> AsyncWebClient:
    """Return an async Slack client authenticated with slack_access_token."""
    return AsyncWebClient(token=settings.slack_access_token, retry_handlers=[])
