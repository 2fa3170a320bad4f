"""Issue creation for submitted bugs.

Builds the create-issue body from a Bug and posts it to Jira. Transport
errors, non-2xx answers and undecodable bodies are logged and reported as
``None`` so the caller can stop its follow-up chain without raising.
"""

import logging

import httpx

from kanobug.config import Settings
from kanobug.jira.client import build_jira_client
from kanobug.jira.models import IssueResult
from kanobug.models.bug import Bug

logger = logging.getLogger(__name__)

ISSUE_ENDPOINT = "/rest/api/2/issue/"
ISSUE_TYPE = "Bug"
ISSUE_LABELS = ["slack"]
ISSUE_PRIORITY = "Not Yet Prioritized"


def build_issue_fields(bug: Bug, project_key: str) -> dict:
    """Return the create-issue request body for ``bug``."""
    return {
        "fields": {
            "project": {"key": project_key},
            "summary": bug.summary,
            "description": (
                f"Product: {bug.product_name}\nReporter: {bug.user_name}\n\n{bug.details}"
            ),
            "issuetype": {"name": ISSUE_TYPE},
            "labels": list(ISSUE_LABELS),
            "priority": {"name": ISSUE_PRIORITY},
        },
    }


def issue_link(host: str, project_key: str, key: str) -> str:
    """Browser link to an issue in the project's issue navigator."""
    return f"https://{host}/projects/{project_key}/issues/{key}"


async def create_issue(bug: Bug, settings: Settings) -> IssueResult | None:
    """File ``bug`` as a Jira issue, returning its id/key/self-link or None."""
    if not settings.jira_api_host:
        logger.warning("jira_api_host not configured, skipping issue for %s", bug.user_id)
        return None

    body = build_issue_fields(bug, settings.jira_project_key)
    try:
        async with build_jira_client(settings) as client:
            response = await client.post(ISSUE_ENDPOINT, json=body)
            response.raise_for_status()
            issue = IssueResult.model_validate(response.json())
    except httpx.HTTPStatusError as exc:
        logger.error(
            "Jira rejected issue for %s: %s %s",
            bug.user_id,
            exc.response.status_code,
            exc.response.text,
        )
        return None
    except (httpx.HTTPError, httpx.InvalidURL):
        logger.error("Jira request failed for %s", bug.user_id, exc_info=True)
        return None
    except ValueError:
        # JSONDecodeError and pydantic ValidationError
        logger.error("Undecodable Jira response for %s", bug.user_id, exc_info=True)
        return None

    logger.info("Created Jira issue %s (id %s) for %s", issue.key, issue.id, bug.user_id)
    return issue
