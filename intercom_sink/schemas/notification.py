"""
Intercom webhook notification envelope.

Every webhook Intercom delivers has the same outer shape; the topic-specific
object sits under ``data.item``. ``Notification`` is generic over that object
so the envelope never needs to know what it carries:

    Notification[Conversation].model_validate_json(raw)
"""

from __future__ import annotations

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, Field, field_serializer, field_validator

from intercom_sink.schemas.wire import EpochSeconds, Int32, WireModel

PayloadT = TypeVar("PayloadT", bound=BaseModel)


class Notification(WireModel, Generic[PayloadT]):
    """Webhook envelope; ``data`` is the unwrapped ``data.item`` payload."""

    type: str
    id: str
    url: Optional[str] = Field(default=None, alias="self")
    created_at: EpochSeconds
    topic: str  # e.g. "conversation.admin.replied"
    delivery_attempts: Int32
    first_sent_at: EpochSeconds
    data: PayloadT

    @field_validator("data", mode="before")
    @classmethod
    def unwrap_item(cls, value: Any) -> Any:
        """Flatten ``{"item": <payload>}`` so ``data`` holds the payload itself."""
        if isinstance(value, BaseModel):
            return value
        if not isinstance(value, dict) or "item" not in value:
            raise ValueError("data must be an object with an 'item' field")
        return value["item"]

    @field_serializer("data", mode="wrap")
    def wrap_item(self, value: Any, handler: Any) -> dict[str, Any]:
        return {"item": handler(value)}
