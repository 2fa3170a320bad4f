"""Slack ingress: request verification, dialog handling, and notifications."""

from kanobug.slack.client import build_slack_client
from kanobug.slack.dialog import build_bug_dialog, open_dialog
from kanobug.slack.notifier import notify_issue_created
from kanobug.slack.router import router

__all__ = [
    "build_bug_dialog",
    "build_slack_client",
    "notify_issue_created",
    "open_dialog",
    "router",
]
