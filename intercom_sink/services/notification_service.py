"""
Service for decoding queued Intercom notifications and encoding them back.

Decoding is all-or-nothing per record: a body that does not decode into a
complete ``Notification[Conversation]`` is logged and dropped.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from pydantic import ValidationError

from intercom_sink.schemas import ConversationNotification

logger = logging.getLogger(__name__)


class NotificationService:
    """Decode raw record bodies; encode decoded notifications for storage."""

    def decode(
        self, body: Union[str, bytes], message_id: Optional[str] = None
    ) -> Optional[ConversationNotification]:
        """
        Decode one record body.

        Args:
            body: Raw JSON text of the webhook notification.
            message_id: Queue message id, only used for logging.

        Returns:
            The decoded notification, or None when the body is not a valid
            conversation notification.
        """
        try:
            return ConversationNotification.model_validate_json(body)
        except ValidationError as e:
            logger.error(
                "record deserialization error: %s",
                e,
                extra={"message_id": message_id, "error_count": e.error_count()},
            )
            return None

    def encode(self, notification: ConversationNotification) -> bytes:
        """Serialize a notification back to its wire JSON."""
        return notification.model_dump_json(by_alias=True).encode("utf-8")
