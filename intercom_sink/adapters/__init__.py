"""Storage adapters for decoded notifications."""

from intercom_sink.adapters.base import BaseStorageAdapter
from intercom_sink.adapters.s3 import S3StorageAdapter

__all__ = ["BaseStorageAdapter", "S3StorageAdapter"]
