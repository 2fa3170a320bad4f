"""Bug record persisted for every accepted dialog submission."""

from datetime import datetime, timedelta, timezone

from pydantic import BaseModel

from kanobug.models.product import product_name
from kanobug.models.slack import DialogSubmission

NOT_APPLICABLE = "N/A"


class Bug(BaseModel):
    """A bug report derived from a dialog submission.

    Written once and never updated: ``updated_at`` always equals ``created_at``.
    ``ttl`` is the Unix timestamp DynamoDB uses to expire the item.
    """

    user_id: str
    user_name: str
    summary: str
    product: str
    details: str
    created_at: datetime
    updated_at: datetime
    ttl: int

    @classmethod
    def from_submission(
        cls,
        submission: DialogSubmission,
        *,
        ttl_days: int = 7,
        now: datetime | None = None,
    ) -> "Bug":
        """Build a Bug from a submission, stamped with the current UTC time."""
        now = now or datetime.now(timezone.utc)
        return cls(
            user_id=submission.user.id,
            user_name=submission.user.name,
            summary=submission.submission.summary,
            product=submission.submission.product,
            details=submission.submission.details or NOT_APPLICABLE,
            created_at=now,
            updated_at=now,
            ttl=int((now + timedelta(days=ttl_days)).timestamp()),
        )

    @property
    def product_name(self) -> str:
        """Human-readable product name, e.g. ``Pixel Kit``."""
        return product_name(self.product)

    def to_item(self) -> dict:
        """Serialize to a DynamoDB item (ISO-8601 timestamps, integer ttl)."""
        return self.model_dump(mode="json")
