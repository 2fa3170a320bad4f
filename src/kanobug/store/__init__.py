"""DynamoDB persistence for bug records."""

from kanobug.store.client import get_table
from kanobug.store.records import save_bug

__all__ = ["get_table", "save_bug"]
