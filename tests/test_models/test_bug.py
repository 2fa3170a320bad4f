"""Tests for the Bug record."""

from datetime import datetime, timedelta, timezone

from kanobug.models.bug import Bug
from kanobug.models.slack import DialogSubmission

NOW = datetime(2026, 10, 17, 12, 30, 0, tzinfo=timezone.utc)


def _submission(details: str | None = "") -> DialogSubmission:
    return DialogSubmission(
        token="tok",
        submission={"summary": "crash on boot", "product": "pixel_kit", "details": details},
        user={"id": "U123", "name": "ada"},
        response_url="https://hooks.slack.com/app/T1/1/abc",
    )


def test_from_submission_copies_fields():
    bug = Bug.from_submission(_submission("steps"), now=NOW)
    assert bug.user_id == "U123"
    assert bug.user_name == "ada"
    assert bug.summary == "crash on boot"
    assert bug.product == "pixel_kit"
    assert bug.details == "steps"


def test_empty_details_become_not_applicable():
    assert Bug.from_submission(_submission(""), now=NOW).details == "N/A"


def test_null_details_become_not_applicable():
    assert Bug.from_submission(_submission(None), now=NOW).details == "N/A"


def test_updated_at_equals_created_at():
    bug = Bug.from_submission(_submission())
    assert bug.updated_at == bug.created_at


def test_ttl_is_seven_days_after_creation():
    bug = Bug.from_submission(_submission(), now=NOW)
    assert bug.ttl == int((NOW + timedelta(days=7)).timestamp())
    assert bug.ttl - int(bug.created_at.timestamp()) == 7 * 24 * 60 * 60


def test_ttl_days_configurable():
    bug = Bug.from_submission(_submission(), ttl_days=1, now=NOW)
    assert bug.ttl - int(NOW.timestamp()) == 24 * 60 * 60


def test_default_timestamp_is_utc():
    bug = Bug.from_submission(_submission())
    assert bug.created_at.tzinfo is not None
    assert bug.created_at.utcoffset() == timedelta(0)


def test_product_name():
    assert Bug.from_submission(_submission(), now=NOW).product_name == "Pixel Kit"


def test_to_item_serializes_for_dynamodb():
    """Timestamps become ISO-8601 strings (sort key is a string); ttl stays an int."""
    item = Bug.from_submission(_submission(), now=NOW).to_item()
    assert item["user_id"] == "U123"
    assert isinstance(item["created_at"], str)
    assert item["created_at"].startswith("2026-10-17T12:30:00")
    assert item["updated_at"] == item["created_at"]
    assert isinstance(item["ttl"], int)
    assert item["details"] == "N/A"


def test_distinct_submissions_produce_distinct_keys():
    """The same submission at two instants yields two records with different keys."""
    first = Bug.from_submission(_submission(), now=NOW)
    second = Bug.from_submission(_submission(), now=NOW + timedelta(seconds=1))
    assert (first.user_id, first.created_at) != (second.user_id, second.created_at)
