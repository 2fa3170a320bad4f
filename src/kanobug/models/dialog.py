"""Outbound dialog models sent to Slack's dialog.open endpoint."""

from pydantic import BaseModel


class DialogOption(BaseModel):
    """One option of a select element."""

    label: str
    value: str


class DialogElement(BaseModel):
    """A single form field of a dialog."""

    label: str
    type: str  # text, textarea, select
    name: str
    value: str | None = None
    hint: str | None = None
    options: list[DialogOption] | None = None
    optional: bool = False


class Dialog(BaseModel):
    """A complete dialog definition."""

    title: str
    callback_id: str
    submit_label: str
    elements: list[DialogElement]


class DialogRequest(BaseModel):
    """Arguments for dialog.open: the trigger plus the dialog to render."""

    trigger_id: str
    dialog: Dialog

    def dialog_payload(self) -> dict:
        """Return the dialog as the JSON-ready dict Slack expects (unset fields omitted)."""
        return self.dialog.model_dump(exclude_none=True)
