"""
SQS event schemas.

Matches the event AWS Lambda receives from an SQS event source mapping.
Only the fields the sink reads are declared; the rest are ignored.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SqsRecord(BaseModel):
    """Single queued message (event.Records[n])."""

    message_id: Optional[str] = Field(default=None, alias="messageId")
    body: Optional[str] = None
    event_source_arn: Optional[str] = Field(default=None, alias="eventSourceARN")

    model_config = ConfigDict(populate_by_name=True)


class SqsEvent(BaseModel):
    """SQS batch delivered to the Lambda handler (root object)."""

    records: list[SqsRecord] = Field(default_factory=list, alias="Records")

    model_config = ConfigDict(populate_by_name=True)
