"""Bug-report dialog definition and the dialog.open call."""

import logging

from slack_sdk.errors import SlackApiError

from kanobug.config import Settings
from kanobug.models.dialog import Dialog, DialogElement, DialogOption, DialogRequest
from kanobug.models.product import PRODUCT_LABELS
from kanobug.slack.client import build_slack_client

logger = logging.getLogger(__name__)

CALLBACK_ID = "report-bug"


def build_bug_dialog(trigger_id: str, text: str) -> DialogRequest:
    """Build the bug-report dialog, pre-filling the summary with ``text``.

    Three elements, in order: a single-line summary seeded with the command's
    free text, a product select over the fixed catalogue, and an optional
    multi-line details field.
    """
    return DialogRequest(
        trigger_id=trigger_id,
        dialog=Dialog(
            title="Report a Bug",
            callback_id=CALLBACK_ID,
            submit_label="Submit",
            elements=[
                DialogElement(
                    label="Summarise the Problem",
                    type="text",
                    name="summary",
                    value=text,
                    hint="A sentence to summarise the problem",
                ),
                DialogElement(
                    label="Product",
                    type="select",
                    name="product",
                    options=[
                        DialogOption(label=label, value=product.value)
                        for product, label in PRODUCT_LABELS.items()
                    ],
                ),
                DialogElement(
                    label="Any more details?",
                    type="textarea",
                    name="details",
                    hint="If you can help us reproduce the bug, that'd be grand.",
                    optional=True,
                ),
            ],
        ),
    )


async def open_dialog(request: DialogRequest, settings: Settings) -> bool:
    """Open a dialog via dialog.open, returning whether Slack accepted it.

    Never raises: Slack API and transport failures are logged and reported
    as ``False``.
    """
    try:
        client = build_slack_client(settings)
        response = await client.dialog_open(
            trigger_id=request.trigger_id,
            dialog=request.dialog_payload(),
        )
    except SlackApiError as exc:
        error_code = exc.response.get("error", "") if exc.response else ""
        logger.warning(
            "dialog.open failed - ok: False, error: %s, trigger_id: %s",
            error_code,
            request.trigger_id,
        )
        return False
    except Exception:
        logger.error(
            "dialog.open request failed for trigger_id %s", request.trigger_id, exc_info=True
        )
        return False

    logger.info(
        "dialog.open - ok: %s, error: %s, trigger_id: %s",
        response.get("ok"),
        response.get("error", ""),
        request.trigger_id,
    )
    return bool(response.get("ok"))
