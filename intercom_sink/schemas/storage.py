"""Results reported by storage adapters and the store command."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class StoreResult(BaseModel):
    """Result of storing one object (success + key, error text on failure)."""

    success: bool
    key: str
    error: Optional[str] = None


class StoreSummary(BaseModel):
    """Counts for one processed SQS batch."""

    received: int = 0
    decoded: int = 0
    stored: int = 0
    failed: int = 0
