"""
Command to store a batch of queued Intercom notifications.

Decodes each SQS record body, then uploads every decoded notification under
a generated key. Bad records and failed uploads are logged and skipped.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Optional

from intercom_sink.adapters.base import BaseStorageAdapter
from intercom_sink.core.file_name import generate_file_name
from intercom_sink.schemas import ConversationNotification
from intercom_sink.schemas.sqs import SqsEvent
from intercom_sink.schemas.storage import StoreResult, StoreSummary
from intercom_sink.services.notification_service import NotificationService

logger = logging.getLogger(__name__)


class StoreNotificationsCommand:
    """
    Command to decode an SQS batch and push each notification to storage.
    Uploads run in parallel on a bounded thread pool.
    """

    def __init__(
        self,
        storage: BaseStorageAdapter,
        notification_service: Optional[NotificationService] = None,
        max_workers: int = 8,
    ) -> None:
        self.storage = storage
        self.notification_service = notification_service or NotificationService()
        self.max_workers = max_workers

    def execute(self, event: SqsEvent) -> StoreSummary:
        """
        Decode and store every record in the batch.

        Args:
            event: SQS batch as delivered to the Lambda handler.

        Returns:
            StoreSummary: received/decoded/stored/failed counts.
        """
        notifications: list[ConversationNotification] = []
        for record in event.records:
            if record.body is None:
                continue
            notification = self.notification_service.decode(
                record.body, message_id=record.message_id
            )
            if notification is not None:
                notifications.append(notification)

        results = self._push_all(notifications)
        for result in results:
            if not result.success:
                logger.error(
                    "error pushing to bucket: %s", result.error, extra={"key": result.key}
                )

        stored = sum(1 for r in results if r.success)
        return StoreSummary(
            received=len(event.records),
            decoded=len(notifications),
            stored=stored,
            failed=len(results) - stored,
        )

    def _push_all(
        self, notifications: list[ConversationNotification]
    ) -> list[StoreResult]:
        if not notifications:
            return []
        workers = min(self.max_workers, len(notifications))
        results: list[StoreResult] = []
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = {}
            for notification in notifications:
                key = generate_file_name(notification.topic)
                futures[pool.submit(self._push, key, notification)] = key
            for future in as_completed(futures):
                key = futures[future]
                try:
                    results.append(future.result())
                except Exception as e:
                    results.append(StoreResult(success=False, key=key, error=str(e)))
        return results

    def _push(self, key: str, notification: ConversationNotification) -> StoreResult:
        body = self.notification_service.encode(notification)
        return self.storage.store(key, body)
