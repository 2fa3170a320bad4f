"""Slash-command and dialog-submission handling.

Both handlers run after the request has been parsed and its verification
token checked. Nothing downstream of that check can change the response:
dialog.open, the DynamoDB write, Jira and the confirmation post all log
their failures and carry on.
"""

import asyncio
import logging

from fastapi import BackgroundTasks

from kanobug.config import Settings
from kanobug.jira import create_issue
from kanobug.models.bug import Bug
from kanobug.models.slack import DialogSubmission, SlashCommand
from kanobug.slack.dialog import build_bug_dialog, open_dialog
from kanobug.slack.notifier import notify_issue_created
from kanobug.store import save_bug

logger = logging.getLogger(__name__)


async def handle_command(command: SlashCommand, settings: Settings) -> None:
    """Open the bug-report dialog, pre-filled with the command's text."""
    logger.info(
        "Command from %s (%s) in %s, text: %r, trigger_id: %s",
        command.user_name,
        command.user_id,
        command.channel_name,
        command.text,
        command.trigger_id,
    )
    await open_dialog(build_bug_dialog(command.trigger_id, command.text), settings)


async def handle_submission(
    submission: DialogSubmission,
    settings: Settings,
    background_tasks: BackgroundTasks,
) -> Bug:
    """Persist the submitted bug and schedule issue filing + confirmation.

    The follow-up runs as a background task: after the response has been
    decided, before the request cycle finishes.
    """
    bug = Bug.from_submission(submission, ttl_days=settings.record_ttl_days)
    logger.info(
        "Submission %s from %s (%s), product: %s",
        submission.callback_id,
        bug.user_name,
        bug.user_id,
        bug.product,
    )

    # boto3 is blocking
    await asyncio.to_thread(save_bug, bug, settings)

    background_tasks.add_task(
        file_issue_and_notify,
        bug=bug,
        response_url=submission.response_url,
        settings=settings,
    )
    return bug


async def file_issue_and_notify(bug: Bug, response_url: str, settings: Settings) -> None:
    """Create a Jira issue for ``bug`` and post a confirmation to ``response_url``.

    Stops after logging if the issue could not be created.
    """
    issue = await create_issue(bug, settings)
    if issue is None:
        logger.warning("No issue created for %s, skipping confirmation", bug.user_id)
        return

    await notify_issue_created(response_url, issue, settings)
