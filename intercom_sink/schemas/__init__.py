"""Typed schemas for Intercom webhook payloads and the surrounding AWS events."""

from intercom_sink.schemas.conversation import Conversation
from intercom_sink.schemas.notification import Notification

ConversationNotification = Notification[Conversation]

__all__ = ["Conversation", "ConversationNotification", "Notification"]
