"""Inbound Slack payload models: slash commands and dialog submissions."""

from pydantic import BaseModel, Field


class SlashCommand(BaseModel):
    """A slash-command invocation, parsed from Slack's form-encoded body."""

    token: str
    trigger_id: str = Field(min_length=1)  # Single-use, expires ~3s after invocation
    text: str  # Free-text argument; may be empty
    team_id: str = ""
    team_domain: str = ""
    channel_id: str = ""
    channel_name: str = ""
    user_id: str = ""
    user_name: str = ""
    response_url: str = ""


class SlackUser(BaseModel):
    """The user who submitted a dialog."""

    id: str = Field(min_length=1)
    name: str = ""


class DialogFields(BaseModel):
    """Answered fields of the bug-report dialog."""

    summary: str = Field(min_length=1)
    product: str = Field(min_length=1)
    details: str | None = None  # Slack sends null for a blank optional textarea


class DialogSubmission(BaseModel):
    """A dialog_submission payload from Slack's interactive-components webhook."""

    token: str
    submission: DialogFields
    user: SlackUser
    type: str = ""
    callback_id: str = ""
    action_ts: str = ""
    response_url: str = ""
