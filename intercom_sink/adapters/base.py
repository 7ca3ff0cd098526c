"""
Storage adapter interface.

Adapters encapsulate backend-specific persistence and report each write as a
``StoreResult`` instead of raising, so one failed object never aborts a batch.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from intercom_sink.schemas.storage import StoreResult

JSON_CONTENT_TYPE = "application/json"


class BaseStorageAdapter(ABC):
    """Contract for storage backends. New backends implement this interface."""

    @abstractmethod
    def store(
        self, key: str, body: bytes, content_type: str = JSON_CONTENT_TYPE
    ) -> StoreResult:
        """Write ``body`` under ``key``. Return success, or the error on failure."""
        ...
