"""DynamoDB table handle.

The table is keyed by ``user_id`` (hash) and ``created_at`` (range) with
TimeToLive enabled on the ``ttl`` attribute.
"""

import boto3

from kanobug.config import Settings


def get_table(settings: Settings):
    """Return a boto3 Table resource for the configured bug table."""
    dynamodb = boto3.resource(
        "dynamodb",
        region_name=settings.region,
        endpoint_url=settings.dynamodb_endpoint_url,
    )
    return dynamodb.Table(settings.table_name)
