"""Confirmation message posted back to the submission's response_url.

Fire-and-forget: errors are caught and logged, never raised.
"""

import logging

from slack_sdk.webhook.async_client import AsyncWebhookClient

from kanobug.config import Settings
from kanobug.jira.models import IssueResult
from kanobug.jira.service import issue_link

logger = logging.getLogger(__name__)


def build_confirmation(issue: IssueResult, settings: Settings) -> str:
    """Compose the confirmation text referencing the created issue."""
    link = issue_link(settings.jira_api_host, settings.jira_project_key, issue.key)
    return f"Bug submitted - ID: {issue.id}, Key: {issue.key}, Issue Link: {link}"


async def notify_issue_created(
    response_url: str, issue: IssueResult, settings: Settings
) -> bool:
    """Post the confirmation for ``issue`` to ``response_url``.

    Returns True when Slack answered 200, False on any failure.
    """
    if not response_url:
        logger.warning("No response_url for issue %s, skipping confirmation", issue.key)
        return False

    webhook = AsyncWebhookClient(
        url=response_url,
        default_headers={"Authorization": f"Bearer {settings.slack_access_token}"},
        retry_handlers=[],
    )
    try:
        response = await webhook.send(text=build_confirmation(issue, settings))
    except Exception:
        logger.warning(
            "Failed to send confirmation for issue %s", issue.key, exc_info=True
        )
        return False

    if response.status_code != 200:
        logger.warning(
            "Confirmation for issue %s rejected: %s %s",
            issue.key,
            response.status_code,
            response.body,
        )
        return False

    logger.info("Confirmation sent for issue %s", issue.key)
    return True
