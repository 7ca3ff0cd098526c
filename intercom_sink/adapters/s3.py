"""
S3 storage adapter.

Writes objects with boto3's ``put_object``. The client is created once per
adapter and shared across upload threads (boto3 clients are thread-safe).
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from intercom_sink.adapters.base import JSON_CONTENT_TYPE, BaseStorageAdapter
from intercom_sink.schemas.storage import StoreResult

logger = logging.getLogger(__name__)


class S3StorageAdapter(BaseStorageAdapter):
    """Store objects in a single S3 bucket."""

    def __init__(
        self,
        bucket_name: str,
        region_name: Optional[str] = None,
        client: Optional[Any] = None,
    ) -> None:
        self._bucket_name = bucket_name
        self._client = client or boto3.client("s3", region_name=region_name)

    @property
    def bucket_name(self) -> str:
        return self._bucket_name

    def store(
        self, key: str, body: bytes, content_type: str = JSON_CONTENT_TYPE
    ) -> StoreResult:
        """Put ``body`` at s3://{bucket}/{key}."""
        try:
            self._client.put_object(
                Bucket=self._bucket_name,
                Key=key,
                Body=body,
                ContentType=content_type,
            )
        except (BotoCoreError, ClientError) as e:
            return StoreResult(success=False, key=key, error=str(e))
        logger.debug("Stored s3://%s/%s (%d bytes)", self._bucket_name, key, len(body))
        return StoreResult(success=True, key=key)
