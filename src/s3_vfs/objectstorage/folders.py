"""Folder creation and default-folder seeding.

A folder is made visible in an otherwise empty prefix by writing a zero-byte
marker object whose key is the folder prefix itself.
"""

from typing import Iterable, Optional, Union

from s3_vfs.core import DEFAULT_FOLDERS, get_logger
from s3_vfs.naming import validate_folder_name
from s3_vfs.objectstorage.clients import S3ClientManager
from s3_vfs.objectstorage.listing import list_folder_names
from s3_vfs.prefix import Prefix

logger = get_logger(__name__)


def put_folder_marker(manager: S3ClientManager, key: str) -> None:
    manager.call("put_object", Key=key, Body=b"")


def create_folder(
    manager: S3ClientManager,
    folder_name: str,
    current_prefix: Union[str, Prefix] = "",
) -> str:
    """Create ``folder_name`` under ``current_prefix``.

    Creating a folder that already exists overwrites its marker and is
    otherwise a no-op.

    Returns:
        Key of the marker object

    Raises:
        ValidationError: If the name is not a valid folder name
        StoreError: If the put request fails
    """
    name = validate_folder_name(folder_name)
    key = Prefix.parse(current_prefix).child(name).value

    logger.debug("Creating folder", bucket=manager.bucket_name, key=key)
    put_folder_marker(manager, key)
    logger.info("Folder created", bucket=manager.bucket_name, key=key)
    return key


def ensure_default_folders(
    manager: S3ClientManager,
    root: Union[str, Prefix] = "",
    names: Optional[Iterable[str]] = None,
) -> list[str]:
    """Create each canonical folder missing under ``root``.

    Folders are created in canonical order. A failure part-way leaves the
    folders created so far in place.

    Returns:
        Keys of the folders that were created, empty if all existed
    """
    root = Prefix.parse(root)
    wanted = list(DEFAULT_FOLDERS if names is None else names)

    existing = list_folder_names(manager, root)
    logger.info(
        "Ensuring default folders exist",
        bucket=manager.bucket_name,
        prefix=root.value,
        existing=sorted(existing),
    )

    created = []
    for name in wanted:
        if name in existing:
            continue
        key = root.child(name).value
        put_folder_marker(manager, key)
        existing.add(name)
        created.append(key)
        logger.info("Created default folder", bucket=manager.bucket_name, key=key)

    return created
