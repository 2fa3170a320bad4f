"""Slack webhook routes: slash command and interactive components."""

from fastapi import APIRouter, BackgroundTasks, Depends
from fastapi.responses import Response

from kanobug.config import Settings, get_settings
from kanobug.models.slack import DialogSubmission, SlashCommand
from kanobug.slack.handlers import handle_command, handle_submission
from kanobug.slack.verification import verify_command, verify_submission

router = APIRouter(prefix="", tags=["slack"])


def _accepted() -> Response:
    """200 with an empty body; Slack closes the dialog on an empty answer."""
    return Response(status_code=200, media_type="application/json")


@router.post("/command")
async def slack_command(
    command: SlashCommand = Depends(verify_command),
    settings: Settings = Depends(get_settings),
) -> Response:
    """Receive a slash command and open the bug-report dialog."""
    await handle_command(command, settings)
    return _accepted()


@router.post("/interactive-component")
async def slack_interactive_component(
    background_tasks: BackgroundTasks,
    submission: DialogSubmission = Depends(verify_submission),
    settings: Settings = Depends(get_settings),
) -> Response:
    """Receive a dialog submission, store it and file it in Jira."""
    await handle_submission(submission, settings, background_tasks)
    return _accepted()
