"""Test configuration and fixtures for s3-vfs."""

import boto3
import pytest
from moto import mock_aws

from s3_vfs.filesystem import S3FileSystem
from s3_vfs.objectstorage.clients import S3ClientConfig, S3ClientManager

BUCKET = "test-bucket"


@pytest.fixture
def aws_credentials(monkeypatch):
    """Fake credentials so nothing can reach a real account."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "test_key")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "test_secret")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")


@pytest.fixture
def s3_client(aws_credentials):
    """Mocked S3 client with an empty test bucket."""
    with mock_aws():
        client = boto3.client("s3", region_name="us-east-1")
        client.create_bucket(Bucket=BUCKET)
        yield client


@pytest.fixture
def manager(s3_client):
    """Client manager bound to the test bucket."""
    return S3ClientManager(S3ClientConfig(bucket_name=BUCKET), client=s3_client)


@pytest.fixture
def fs(manager):
    """Filesystem facade over the test bucket."""
    return S3FileSystem(manager)


def put(client, *keys, body=b"content"):
    """Create objects; keys ending in '/' become zero-byte folder markers."""
    for key in keys:
        client.put_object(Bucket=BUCKET, Key=key, Body=b"" if key.endswith("/") else body)


def all_keys(client, prefix=""):
    paginator = client.get_paginator("list_objects_v2")
    return sorted(
        obj["Key"]
        for page in paginator.paginate(Bucket=BUCKET, Prefix=prefix)
        for obj in page.get("Contents", [])
    )
