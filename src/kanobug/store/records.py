"""Bug record writes."""

import logging

from kanobug.config import Settings
from kanobug.models.bug import Bug
from kanobug.store.client import get_table

logger = logging.getLogger(__name__)


def save_bug(bug: Bug, settings: Settings) -> bool:
    """Write ``bug`` with a single unconditional put (last writer wins).

    Returns True on success. Any store or configuration error is logged and
    reported as False.
    """
    try:
        table = get_table(settings)
        table.put_item(Item=bug.to_item())
    except Exception:
        # botocore raises plain ValueError for malformed endpoints
        logger.error(
            "PutItem failed (%s/%s/%s/%s)",
            bug.user_id,
            bug.user_name,
            bug.summary,
            bug.product,
            exc_info=True,
        )
        return False

    logger.info(
        "PutItem ok (%s/%s/%s/%s), created_at: %s",
        bug.user_id,
        bug.user_name,
        bug.summary,
        bug.product,
        bug.created_at.isoformat(),
    )
    return True
