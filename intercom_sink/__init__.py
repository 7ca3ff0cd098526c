"""Intercom conversation webhook sink: SQS -> typed decode -> S3."""

__version__ = "0.1.0"
