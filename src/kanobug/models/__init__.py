"""Data models for the Kanobug bug-report flow."""

from kanobug.models.bug import Bug
from kanobug.models.dialog import Dialog, DialogElement, DialogOption, DialogRequest
from kanobug.models.product import PRODUCT_LABELS, Product, product_name
from kanobug.models.slack import DialogFields, DialogSubmission, SlackUser, SlashCommand

__all__ = [
    "Bug",
    "Dialog",
    "DialogElement",
    "DialogFields",
    "DialogOption",
    "DialogRequest",
    "DialogSubmission",
    "PRODUCT_LABELS",
    "Product",
    "SlackUser",
    "SlashCommand",
    "product_name",
]
