"""Jira output: issue creation for submitted bugs."""

from kanobug.jira.client import build_jira_client
from kanobug.jira.models import IssueResult
from kanobug.jira.service import build_issue_fields, create_issue, issue_link

__all__ = [
    "IssueResult",
    "build_issue_fields",
    "build_jira_client",
    "create_issue",
    "issue_link",
]
