"""Jira REST client factory.

Builds a short-lived httpx.AsyncClient per call, authenticated with basic
auth (Atlassian account email + API token) against the configured host.
"""

import httpx

from kanobug.config import Settings

# Matches the serverless function timeout; no retries are configured.
_TIMEOUT_SECONDS = 30.0


def build_jira_client(
    settings: Settings, transport: httpx.AsyncBaseTransport | None = None
) -> httpx.AsyncClient:
    """Return an AsyncClient rooted at ``https://<jira_api_host>``."""
    return httpx.AsyncClient(
        base_url=f"https://{settings.jira_api_host}",
        auth=httpx.BasicAuth(settings.jira_api_user, settings.jira_api_token),
        headers={"Content-Type": "application/json"},
        timeout=httpx.Timeout(_TIMEOUT_SECONDS),
        transport=transport,
    )
