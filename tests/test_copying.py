"""Tests for copy and rename with mocked S3."""

from unittest.mock import patch

import pytest
from botocore.exceptions import ClientError

from conftest import BUCKET, all_keys, put
from s3_vfs.core.exceptions import ConflictError, StoreError, ValidationError
from s3_vfs.objectstorage.copying import copy_key, rename


class TestCopyKey:
    """Test single-object and folder copy."""

    def test_copies_single_object(self, manager, s3_client):
        put(s3_client, "a.txt", body=b"hello")

        assert copy_key(manager, "a.txt", "b.txt") == 1

        assert all_keys(s3_client) == ["a.txt", "b.txt"]
        body = s3_client.get_object(Bucket=BUCKET, Key="b.txt")["Body"].read()
        assert body == b"hello"

    def test_folder_copy_preserves_structure(self, manager, s3_client):
        put(s3_client, "a/x.txt", "a/sub/y.txt")

        assert copy_key(manager, "a/", "b/") == 2

        assert all_keys(s3_client, "b/") == ["b/sub/y.txt", "b/x.txt"]
        assert all_keys(s3_client, "a/") == ["a/sub/y.txt", "a/x.txt"]

    def test_folder_copy_follows_continuation_tokens(self, manager, s3_client):
        real_list = s3_client.list_objects_v2

        def small_pages(**kwargs):
            return real_list(MaxKeys=2, **kwargs)

        put(s3_client, *(f"src/f{i}.txt" for i in range(5)))

        with patch.object(s3_client, "list_objects_v2", side_effect=small_pages) as list_spy:
            assert copy_key(manager, "src/", "dst/") == 5

        assert list_spy.call_count == 3
        assert all_keys(s3_client, "dst/") == [f"dst/f{i}.txt" for i in range(5)]

    def test_folder_copy_into_own_subtree_is_rejected(self, manager, s3_client):
        """Copying a folder beneath itself must fail before any request."""
        real_list = s3_client.list_objects_v2

        def small_pages(**kwargs):
            return real_list(MaxKeys=2, **kwargs)

        put(s3_client, "a/x.txt", "a/y.txt", "a/sub/z.txt")

        with patch.object(s3_client, "list_objects_v2", side_effect=small_pages) as list_spy, \
                patch.object(s3_client, "copy_object", wraps=s3_client.copy_object) as copy_spy:
            with pytest.raises(ValidationError, match="into itself"):
                copy_key(manager, "a/", "a/z/")
            with pytest.raises(ValidationError):
                copy_key(manager, "a/", "a")

        assert list_spy.call_count == 0
        assert copy_spy.call_count == 0
        assert all_keys(s3_client) == ["a/sub/z.txt", "a/x.txt", "a/y.txt"]

    def test_folder_copy_to_sibling_sharing_name_start(self, manager, s3_client):
        put(s3_client, "a/x.txt")

        assert copy_key(manager, "a/", "ab/") == 1

        assert all_keys(s3_client) == ["a/x.txt", "ab/x.txt"]


class TestRename:
    """Test rename built from copy then delete."""

    def test_renames_file(self, manager, s3_client):
        put(s3_client, "docs/draft.txt")

        assert rename(manager, "draft.txt", "final.txt", False, "docs/") == "docs/final.txt"

        assert all_keys(s3_client) == ["docs/final.txt"]

    def test_file_rename_leaves_keys_sharing_the_name(self, manager, s3_client):
        put(s3_client, "docs/draft.txt", "docs/draft.txt.bak")

        rename(manager, "draft.txt", "final.txt", False, "docs/")

        assert all_keys(s3_client) == ["docs/draft.txt.bak", "docs/final.txt"]

    def test_renames_folder_with_contents(self, manager, s3_client):
        put(s3_client, "home/Old/", "home/Old/a.txt", "home/Old/deep/b.txt", "home/Older/c.txt")

        new_key = rename(manager, "Old", "New name", True, "home/")

        assert new_key == "home/New name/"
        assert all_keys(s3_client) == [
            "home/New name/",
            "home/New name/a.txt",
            "home/New name/deep/b.txt",
            "home/Older/c.txt",
        ]

    def test_conflict_aborts_before_copy(self, manager, s3_client):
        put(s3_client, "draft.txt", "final.txt")

        with patch.object(s3_client, "copy_object", wraps=s3_client.copy_object) as copy_spy:
            with pytest.raises(ConflictError) as exc_info:
                rename(manager, "draft.txt", "final.txt", False)

        copy_spy.assert_not_called()
        assert exc_info.value.key == "final.txt"
        assert all_keys(s3_client) == ["draft.txt", "final.txt"]

    def test_folder_conflict(self, manager, s3_client):
        put(s3_client, "a/x.txt", "b/y.txt")

        with pytest.raises(ConflictError):
            rename(manager, "a", "b", True)

        assert all_keys(s3_client) == ["a/x.txt", "b/y.txt"]

    def test_same_name_is_noop(self, manager, s3_client):
        put(s3_client, "a.txt")

        with patch.object(s3_client, "list_objects_v2", wraps=s3_client.list_objects_v2) as list_spy:
            assert rename(manager, "a.txt", "a.txt", False) is None

        list_spy.assert_not_called()
        assert all_keys(s3_client) == ["a.txt"]

    @pytest.mark.parametrize(
        "old_name, new_name, is_folder",
        [
            ("", "x.txt", False),
            ("a.txt", "", False),
            ("a.txt", "report", False),
            ("a.txt", "sub/b.txt", False),
            ("dir", "bad:name", True),
            ("dir", "trailing.", True),
        ],
    )
    def test_invalid_names_make_no_request(self, manager, s3_client, old_name, new_name, is_folder):
        put(s3_client, "a.txt", "dir/x.txt")

        with patch.object(s3_client, "list_objects_v2", wraps=s3_client.list_objects_v2) as list_spy:
            with pytest.raises(ValidationError):
                rename(manager, old_name, new_name, is_folder)

        list_spy.assert_not_called()
        assert all_keys(s3_client) == ["a.txt", "dir/x.txt"]

    def test_delete_failure_leaves_both_keys(self, manager, s3_client):
        put(s3_client, "draft.txt")
        denied = ClientError(
            {"Error": {"Code": "AccessDenied", "Message": "Access Denied"}}, "DeleteObjects"
        )

        with patch.object(s3_client, "delete_objects", side_effect=denied):
            with pytest.raises(StoreError) as exc_info:
                rename(manager, "draft.txt", "final.txt", False)

        assert exc_info.value.operation == "delete_objects"
        assert all_keys(s3_client) == ["draft.txt", "final.txt"]
