"""Object key generation for stored notifications."""

from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID, uuid4


def get_file_name(now: datetime, topic: str, uuid: UUID) -> str:
    """
    Build the object key for a notification.

    Form: {YYYYMMDD}_{topic}_{uuid}.json, with the dots of the topic replaced
    by underscores (conversation.admin.replied -> conversation_admin_replied).
    """
    return f"{now.strftime('%Y%m%d')}_{topic.replace('.', '_')}_{uuid}.json"


def generate_file_name(topic: str) -> str:
    """Object key for a notification received now."""
    return get_file_name(datetime.now(timezone.utc), topic, uuid4())
