"""Recursive deletion of everything under a prefix."""

from typing import Union

from s3_vfs.core import get_logger
from s3_vfs.core.exceptions import StoreError, ValidationError
from s3_vfs.objectstorage.clients import S3ClientManager
from s3_vfs.prefix import Prefix

logger = get_logger(__name__)

# Upper bound on keys per DeleteObjects request
DELETE_BATCH_SIZE = 1000


def delete_keys(manager: S3ClientManager, keys: list[str]) -> None:
    """Delete up to :data:`DELETE_BATCH_SIZE` keys in one request.

    Raises:
        StoreError: If the request fails or the store rejects any key
    """
    response = manager.call(
        "delete_objects",
        Delete={"Objects": [{"Key": key} for key in keys], "Quiet": True},
    )
    errors = response.get("Errors") or []
    if errors:
        first = errors[0]
        raise StoreError(
            "delete_objects",
            f"{len(errors)} of {len(keys)} keys not deleted, "
            f"first {first.get('Key')!r}: {first.get('Message')}",
            code=first.get("Code"),
        )


def delete_prefix(
    manager: S3ClientManager,
    prefix: Union[str, Prefix],
    allow_root: bool = False,
) -> int:
    """Delete every object whose key starts with ``prefix``.

    Works one list segment at a time: list, batch-delete what was listed, and
    repeat while the listing was truncated. An empty prefix is a no-op.

    Args:
        manager: Bucket-bound client manager
        prefix: Key prefix; a folder prefix or a single key
        allow_root: Must be set to delete with an empty prefix (whole bucket)

    Returns:
        Number of keys deleted

    Raises:
        ValidationError: If ``prefix`` is empty and ``allow_root`` is not set
        StoreError: If a list or delete request fails
    """
    prefix = str(prefix)
    if not prefix and not allow_root:
        raise ValidationError("Refusing to delete the bucket root without allow_root")

    deleted = 0
    batches = 0
    while True:
        listed = manager.call(
            "list_objects_v2", Prefix=prefix, MaxKeys=DELETE_BATCH_SIZE
        )
        keys = [obj["Key"] for obj in listed.get("Contents", [])]
        if not keys:
            break

        delete_keys(manager, keys)
        deleted += len(keys)
        batches += 1

        if not listed.get("IsTruncated"):
            break

    logger.info(
        "Prefix deleted",
        bucket=manager.bucket_name,
        prefix=prefix,
        deleted=deleted,
        batches=batches,
    )
    return deleted
