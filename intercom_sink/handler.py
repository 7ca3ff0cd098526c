"""
AWS Lambda entry point.

Receives Intercom webhook notifications from SQS and writes each decoded
conversation notification to the OUTPUT_BUCKET S3 bucket as JSON.
"""

from __future__ import annotations

from typing import Any

from intercom_sink.adapters.s3 import S3StorageAdapter
from intercom_sink.commands.store_notifications_command import (
    StoreNotificationsCommand,
)
from intercom_sink.config import get_settings
from intercom_sink.infra.logging_config import LoggingConfig, get_logger
from intercom_sink.schemas.sqs import SqsEvent

LoggingConfig()  # Initialize logging

logger = get_logger("handler")


def handler(event: dict[str, Any], context: Any = None) -> dict[str, int]:
    """
    Process one SQS batch.

    Args:
        event: Raw SQS event (``{"Records": [...]}``).
        context: Lambda context object (unused).

    Returns:
        dict: received/decoded/stored/failed counts for the batch.

    Raises:
        RuntimeError: If OUTPUT_BUCKET is not configured.
    """
    settings = get_settings()
    if not settings.output_bucket:
        raise RuntimeError("OUTPUT_BUCKET is not configured")

    storage = S3StorageAdapter(
        bucket_name=settings.output_bucket, region_name=settings.aws_region
    )
    command = StoreNotificationsCommand(
        storage, max_workers=settings.upload_concurrency
    )
    summary = command.execute(SqsEvent.model_validate(event))
    logger.info(
        "Processed SQS batch: received=%d decoded=%d stored=%d failed=%d",
        summary.received,
        summary.decoded,
        summary.stored,
        summary.failed,
    )
    return summary.model_dump()
