"""Tests for folder creation and default-folder seeding."""

from unittest.mock import patch

import pytest
from botocore.exceptions import ClientError

from conftest import BUCKET, all_keys, put
from s3_vfs.core import DEFAULT_FOLDERS
from s3_vfs.core.exceptions import StoreError, ValidationError
from s3_vfs.objectstorage.folders import create_folder, ensure_default_folders


class TestCreateFolder:
    """Test folder creation."""

    def test_creates_zero_byte_marker(self, manager, s3_client):
        key = create_folder(manager, "Tax returns", "users/alice/")

        assert key == "users/alice/Tax returns/"
        head = s3_client.head_object(Bucket=BUCKET, Key=key)
        assert head["ContentLength"] == 0

    def test_creates_at_root(self, manager, s3_client):
        assert create_folder(manager, "Archive") == "Archive/"
        assert all_keys(s3_client) == ["Archive/"]

    def test_existing_folder_is_overwritten_silently(self, manager, s3_client):
        put(s3_client, "docs/", "docs/a.txt")

        create_folder(manager, "docs")

        assert all_keys(s3_client) == ["docs/", "docs/a.txt"]

    def test_invalid_name_makes_no_request(self, manager, s3_client):
        with patch.object(s3_client, "put_object", wraps=s3_client.put_object) as put_spy:
            with pytest.raises(ValidationError):
                create_folder(manager, "bad/name", "users/")

        put_spy.assert_not_called()
        assert all_keys(s3_client) == []


class TestEnsureDefaultFolders:
    """Test default-folder seeding."""

    def test_creates_all_defaults(self, manager, s3_client):
        created = ensure_default_folders(manager, "users/alice/")

        assert created == [f"users/alice/{name}/" for name in DEFAULT_FOLDERS]
        assert all_keys(s3_client) == sorted(created)

    def test_is_idempotent(self, manager, s3_client):
        ensure_default_folders(manager, "users/alice/")
        second = ensure_default_folders(manager, "users/alice/")

        assert second == []
        assert all_keys(s3_client) == sorted(
            f"users/alice/{name}/" for name in DEFAULT_FOLDERS
        )

    def test_only_creates_missing(self, manager, s3_client):
        put(s3_client, "root/Legal documents/will.pdf", "root/Care payments/")

        created = ensure_default_folders(manager, "root/")

        assert "root/Legal documents/" not in created
        assert "root/Care payments/" not in created
        assert len(created) == len(DEFAULT_FOLDERS) - 2

    def test_custom_names(self, manager, s3_client):
        created = ensure_default_folders(manager, "", names=["Inbox", "Outbox"])

        assert created == ["Inbox/", "Outbox/"]

    def test_partial_failure_keeps_earlier_folders(self, manager, s3_client):
        real_put = s3_client.put_object
        calls = []

        def failing_put(**kwargs):
            calls.append(kwargs["Key"])
            if len(calls) == 3:
                raise ClientError(
                    {"Error": {"Code": "InternalError", "Message": "boom"}}, "PutObject"
                )
            return real_put(**kwargs)

        with patch.object(s3_client, "put_object", side_effect=failing_put):
            with pytest.raises(StoreError):
                ensure_default_folders(manager, "r/")

        assert all_keys(s3_client) == sorted(f"r/{name}/" for name in DEFAULT_FOLDERS[:2])
