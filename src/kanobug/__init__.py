"""Kanobug: Slack bug-report dialog backed by DynamoDB and Jira."""

__version__ = "0.1.0"
