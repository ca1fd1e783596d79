"""Server-side copy, and rename/move built from copy then delete.

S3 has no rename. A rename copies every affected key to its new name and then
deletes the old keys. The two phases are not atomic: if the delete fails after
the copy succeeded, both the old and the new keys remain and the delete error
is raised.
"""

from typing import Optional, Union

from s3_vfs.core import get_logger
from s3_vfs.core.exceptions import ConflictError, ValidationError
from s3_vfs.naming import validate_file_name, validate_folder_name
from s3_vfs.objectstorage.clients import S3ClientManager
from s3_vfs.objectstorage.deletion import delete_keys, delete_prefix
from s3_vfs.objectstorage.listing import prefix_has_objects
from s3_vfs.prefix import DELIMITER, Prefix

logger = get_logger(__name__)


def copy_object(manager: S3ClientManager, source_key: str, destination_key: str) -> None:
    manager.call(
        "copy_object",
        CopySource={"Bucket": manager.bucket_name, "Key": source_key},
        Key=destination_key,
    )


def copy_folder(manager: S3ClientManager, source_prefix: str, destination_prefix: str) -> int:
    """Copy every object under ``source_prefix`` to ``destination_prefix``.

    Follows continuation tokens until the listing is exhausted, so the whole
    subtree is copied with its relative layout preserved.

    Returns:
        Number of objects copied
    """
    copied = 0
    params = {"Prefix": source_prefix}
    while True:
        listed = manager.call("list_objects_v2", **params)
        for obj in listed.get("Contents", []):
            new_key = Prefix.rebase(obj["Key"], source_prefix, destination_prefix)
            copy_object(manager, obj["Key"], new_key)
            copied += 1

        token = listed.get("NextContinuationToken")
        if not token:
            break
        params["ContinuationToken"] = token

    logger.info(
        "Folder copied",
        bucket=manager.bucket_name,
        source=source_prefix,
        destination=destination_prefix,
        copied=copied,
    )
    return copied


def copy_key(manager: S3ClientManager, source_key: str, destination_key: str) -> int:
    """Copy a single object, or a whole folder when ``source_key`` ends in ``/``.

    Returns:
        Number of objects copied

    Raises:
        ValidationError: If a folder would be copied into its own subtree
    """
    logger.info(
        "Copying",
        bucket=manager.bucket_name,
        source=source_key,
        destination=destination_key,
    )
    if source_key.endswith(DELIMITER):
        destination_prefix = Prefix.parse(destination_key).value
        # Copies would land inside the listing being paged through
        if destination_prefix.startswith(source_key):
            raise ValidationError(
                f"Cannot copy folder {source_key!r} into itself ({destination_prefix!r})"
            )
        return copy_folder(manager, source_key, destination_prefix)

    copy_object(manager, source_key, destination_key)
    return 1


def ensure_absent(manager: S3ClientManager, key: str) -> None:
    """Raise :class:`ConflictError` if any key starts with ``key``."""
    if prefix_has_objects(manager, key):
        raise ConflictError(key)


def rename(
    manager: S3ClientManager,
    old_name: str,
    new_name: str,
    is_folder: bool,
    current_prefix: Union[str, Prefix] = "",
) -> Optional[str]:
    """Rename a file or folder inside ``current_prefix``.

    Steps run strictly in order: validate, check the destination is free, copy,
    delete the source. Nothing is copied when validation or the destination
    check fails.

    Args:
        manager: Bucket-bound client manager
        old_name: Current name, relative to ``current_prefix``
        new_name: New name, relative to ``current_prefix``
        is_folder: Whether the names refer to a folder
        current_prefix: Folder both names live in

    Returns:
        The new key, or None when the names are identical

    Raises:
        ValidationError: If a name is missing or ``new_name`` is invalid
        ConflictError: If something already exists at the new name
        StoreError: If a copy or delete request fails
    """
    if not old_name or not new_name:
        raise ValidationError("New filename must be provided")
    if old_name == new_name:
        logger.info("Old and new name are the same, nothing to rename", name=old_name)
        return None

    prefix = Prefix.parse(current_prefix)
    if is_folder:
        new_name = validate_folder_name(new_name)
        old_key = prefix.child(old_name.rstrip(DELIMITER)).value
        new_key = prefix.child(new_name).value
    else:
        new_name = validate_file_name(new_name)
        old_key = prefix.key(old_name)
        new_key = prefix.key(new_name)

    logger.info(
        "Renaming",
        bucket=manager.bucket_name,
        source=old_key,
        destination=new_key,
        is_folder=is_folder,
    )
    ensure_absent(manager, new_key)
    copy_key(manager, old_key, new_key)

    if is_folder:
        delete_prefix(manager, old_key)
    else:
        delete_keys(manager, [old_key])

    logger.info("Renamed", bucket=manager.bucket_name, source=old_key, destination=new_key)
    return new_key
