"""Inbound request parsing and verification-token checks as FastAPI dependencies.

Slack posts both webhooks as ``application/x-www-form-urlencoded``. Slash
commands carry their fields directly; interactive components carry a single
``payload`` field holding JSON. Any body that does not parse into the expected
model, and any token that does not match the configured verification token,
is rejected with a 400 before a handler runs.
"""

import hmac
import json
import logging
from urllib.parse import parse_qs

from fastapi import Depends, HTTPException, Request
from pydantic import ValidationError

from kanobug.config import Settings, get_settings
from kanobug.models.slack import DialogSubmission, SlashCommand

logger = logging.getLogger(__name__)

COMMAND_HANDLER = "KanobugCommand"
INTERACTIVE_HANDLER = "KanobugInteractiveComponent"


def _reject(handler: str, reason: str) -> HTTPException:
    return HTTPException(status_code=400, detail=f"{handler} submitting - error: {reason}")


def _describe(exc: ValidationError) -> str:
    """Flatten pydantic errors into ``loc: msg`` pairs."""
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )


def parse_form(body: bytes) -> dict[str, str]:
    """Decode a form-encoded body, keeping the first value of each field.

    Blank values are kept so an empty slash-command ``text`` survives.
    """
    fields = parse_qs(body.decode("utf-8"), keep_blank_values=True)
    return {key: values[0] for key, values in fields.items()}


def check_token(supplied: str, settings: Settings, handler: str) -> None:
    """Raise a 400 unless ``supplied`` equals the configured verification token."""
    expected = settings.slack_verification_token
    # An unconfigured token rejects everything, including an empty supplied token.
    if not expected or not hmac.compare_digest(supplied.encode(), expected.encode()):
        logger.warning("%s rejected request: invalid verification token", handler)
        raise _reject(handler, "invalid verification token")


async def verify_command(
    request: Request, settings: Settings = Depends(get_settings)
) -> SlashCommand:
    """Parse and verify a slash-command request, returning the command."""
    body = await request.body()
    try:
        command = SlashCommand.model_validate(parse_form(body))
    except (UnicodeDecodeError, ValidationError) as exc:
        reason = _describe(exc) if isinstance(exc, ValidationError) else str(exc)
        logger.warning("%s received malformed body: %s", COMMAND_HANDLER, reason)
        raise _reject(COMMAND_HANDLER, f"malformed request: {reason}") from exc

    check_token(command.token, settings, COMMAND_HANDLER)
    return command


async def verify_submission(
    request: Request, settings: Settings = Depends(get_settings)
) -> DialogSubmission:
    """Parse and verify an interactive-component request, returning the submission."""
    body = await request.body()
    try:
        form = parse_form(body)
    except UnicodeDecodeError as exc:
        logger.warning("%s received undecodable body: %s", INTERACTIVE_HANDLER, exc)
        raise _reject(INTERACTIVE_HANDLER, f"malformed request: {exc}") from exc

    raw = form.get("payload")
    if not raw:
        logger.warning("%s received body without payload", INTERACTIVE_HANDLER)
        raise _reject(INTERACTIVE_HANDLER, "malformed request: missing payload")

    try:
        submission = DialogSubmission.model_validate(json.loads(raw))
    except json.JSONDecodeError as exc:
        logger.warning("%s received non-JSON payload: %s", INTERACTIVE_HANDLER, exc)
        raise _reject(
            INTERACTIVE_HANDLER, f"malformed request: payload is not JSON ({exc.msg})"
        ) from exc
    except ValidationError as exc:
        reason = _describe(exc)
        logger.warning("%s received invalid payload: %s", INTERACTIVE_HANDLER, reason)
        raise _reject(INTERACTIVE_HANDLER, f"malformed request: {reason}") from exc

    check_token(submission.token, settings, INTERACTIVE_HANDLER)
    return submission
