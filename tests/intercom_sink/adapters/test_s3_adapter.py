"""Tests for S3StorageAdapter."""

from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from intercom_sink.adapters.s3 import S3StorageAdapter


@pytest.fixture
def s3_client():
    return MagicMock()


@pytest.fixture
def s3_adapter(s3_client):
    return S3StorageAdapter(bucket_name="intercom-archive", client=s3_client)


def test_store_puts_object(s3_adapter, s3_client):
    result = s3_adapter.store("20240101_ping_1.json", b'{"a": 1}')

    assert result.success is True
    assert result.key == "20240101_ping_1.json"
    assert result.error is None
    s3_client.put_object.assert_called_once_with(
        Bucket="intercom-archive",
        Key="20240101_ping_1.json",
        Body=b'{"a": 1}',
        ContentType="application/json",
    )


def test_store_client_error(s3_adapter, s3_client):
    s3_client.put_object.side_effect = ClientError(
        {"Error": {"Code": "AccessDenied", "Message": "Access Denied"}}, "PutObject"
    )
    result = s3_adapter.store("k.json", b"{}")
    assert result.success is False
    assert result.key == "k.json"
    assert "AccessDenied" in result.error


def test_store_connection_error(s3_adapter, s3_client):
    s3_client.put_object.side_effect = EndpointConnectionError(
        endpoint_url="https://s3.eu-west-1.amazonaws.com"
    )
    result = s3_adapter.store("k.json", b"{}")
    assert result.success is False


def test_store_unexpected_error_propagates(s3_adapter, s3_client):
    s3_client.put_object.side_effect = TypeError("boom")
    with pytest.raises(TypeError):
        s3_adapter.store("k.json", b"{}")


@patch("intercom_sink.adapters.s3.boto3")
def test_default_client_uses_region(mock_boto3):
    adapter = S3StorageAdapter(bucket_name="intercom-archive", region_name="eu-west-1")
    mock_boto3.client.assert_called_once_with("s3", region_name="eu-west-1")
    assert adapter.bucket_name == "intercom-archive"
