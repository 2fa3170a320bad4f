"""Tests for the inbound Slack models."""

import pytest
from pydantic import ValidationError

from kanobug.models.slack import DialogSubmission, SlashCommand


def _submission(**overrides) -> dict:
    base = {
        "type": "dialog_submission",
        "submission": {"summary": "crash on boot", "product": "pixel_kit", "details": None},
        "callback_id": "report-bug",
        "user": {"id": "U123", "name": "ada"},
        "action_ts": "1536000000.000001",
        "token": "tok",
        "response_url": "https://hooks.slack.com/app/T1/1/abc",
    }
    base.update(overrides)
    return base


def test_slash_command_minimal_fields():
    """Only token, trigger_id and text are required; the rest default to empty."""
    command = SlashCommand(token="tok", trigger_id="123.456.abc", text="")
    assert command.text == ""
    assert command.user_id == ""
    assert command.response_url == ""


def test_slash_command_requires_trigger_id():
    with pytest.raises(ValidationError):
        SlashCommand(token="tok", text="button stuck")


def test_slash_command_rejects_blank_trigger_id():
    with pytest.raises(ValidationError):
        SlashCommand(token="tok", trigger_id="", text="button stuck")


def test_dialog_submission_valid():
    submission = DialogSubmission.model_validate(_submission())
    assert submission.user.id == "U123"
    assert submission.submission.product == "pixel_kit"
    assert submission.submission.details is None


def test_dialog_submission_requires_user():
    payload = _submission()
    del payload["user"]
    with pytest.raises(ValidationError):
        DialogSubmission.model_validate(payload)


def test_dialog_submission_requires_summary():
    payload = _submission(submission={"product": "pixel_kit"})
    with pytest.raises(ValidationError):
        DialogSubmission.model_validate(payload)
