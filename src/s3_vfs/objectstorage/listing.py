"""Directory listing over S3 common prefixes."""

import re
from typing import Optional, Pattern, Union
from urllib.parse import quote

from s3_vfs.core import get_logger
from s3_vfs.objectstorage.clients import S3ClientManager
from s3_vfs.prefix import DELIMITER, Prefix
from s3_vfs.schemas import DirectoryListing, FolderEntry, ObjectEntry

logger = get_logger(__name__)

# Matches nothing; the default when no exclusion pattern is configured
NEVER_MATCH = re.compile(r"(?!)")

# Same unreserved set as JavaScript's encodeURIComponent
_URL_SAFE = "-_.!~*'()"


def compile_exclusion(pattern: Union[str, Pattern[str], None]) -> Pattern[str]:
    if pattern is None or pattern == "":
        return NEVER_MATCH
    if isinstance(pattern, str):
        return re.compile(pattern)
    return pattern


def object_url(bucket: str, key: str) -> str:
    """Public-style URL for an object, with the key fully percent-encoded."""
    return f"https://{bucket}.s3.amazonaws.com/{quote(key, safe=_URL_SAFE)}"


def folder_url(prefix: str) -> str:
    """Navigation link for a folder."""
    return f"/?prefix={prefix}"


def is_folder_marker(obj: dict) -> bool:
    """Zero-byte keys ending in the delimiter only exist to keep a folder visible."""
    return obj.get("Size", 0) == 0 and obj["Key"].endswith(DELIMITER)


def list_directory(
    manager: S3ClientManager,
    prefix: Union[str, Prefix] = "",
    exclude: Union[str, Pattern[str], None] = None,
    max_keys: Optional[int] = None,
) -> DirectoryListing:
    """List the immediate sub-folders and objects of a prefix.

    Only the first page returned by the store is used. Check
    ``DirectoryListing.truncated`` to see whether entries were left out.

    Args:
        manager: Bucket-bound client manager
        prefix: Folder to list; ``""`` is the bucket root
        exclude: Regular expression; matching prefixes and keys are hidden
        max_keys: Page size to request, store default if omitted

    Returns:
        DirectoryListing with folders and objects in store order

    Raises:
        StoreError: If the list request fails
    """
    prefix = Prefix.parse(prefix)
    exclusion = compile_exclusion(exclude)

    params = {"Prefix": prefix.value, "Delimiter": DELIMITER}
    if max_keys:
        params["MaxKeys"] = max_keys
    response = manager.call("list_objects_v2", **params)

    folders = [
        FolderEntry(
            name=Prefix(common["Prefix"]).name,
            path=common["Prefix"],
            url=folder_url(common["Prefix"]),
        )
        for common in response.get("CommonPrefixes", [])
        if not exclusion.search(common["Prefix"])
    ]
    objects = [
        ObjectEntry(
            name=prefix.relative(obj["Key"]),
            last_modified=obj.get("LastModified"),
            size=obj.get("Size", 0),
            path=obj["Key"],
            url=object_url(manager.bucket_name, obj["Key"]),
        )
        for obj in response.get("Contents", [])
        if not is_folder_marker(obj) and not exclusion.search(obj["Key"])
    ]

    logger.info(
        "Directory listed",
        bucket=manager.bucket_name,
        prefix=prefix.value,
        folder_count=len(folders),
        object_count=len(objects),
    )
    return DirectoryListing(
        prefix=prefix.value,
        folders=folders,
        objects=objects,
        truncated=bool(response.get("IsTruncated", False)),
    )


def list_folder_names(manager: S3ClientManager, prefix: Union[str, Prefix]) -> set[str]:
    """Names of the immediate sub-folders of ``prefix``, first page only."""
    prefix = Prefix.parse(prefix)
    response = manager.call(
        "list_objects_v2", Prefix=prefix.value, Delimiter=DELIMITER
    )
    return {Prefix(common["Prefix"]).name for common in response.get("CommonPrefixes", [])}


def prefix_has_objects(manager: S3ClientManager, key: str) -> bool:
    """True if at least one key starts with ``key``."""
    response = manager.call("list_objects_v2", Prefix=key, MaxKeys=1)
    return bool(response.get("Contents"))
