"""File upload with content-type inference."""

import mimetypes
from pathlib import Path
from typing import Any, BinaryIO, Dict, Union

from s3_vfs.core import get_logger
from s3_vfs.objectstorage.clients import S3ClientManager
from s3_vfs.prefix import Prefix

logger = get_logger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"


def guess_content_type(file_name: str) -> str:
    """Guess the MIME type from the file name extension."""
    content_type, _ = mimetypes.guess_type(file_name)
    return content_type or DEFAULT_CONTENT_TYPE


def upload_file(
    manager: S3ClientManager,
    file_name: str,
    body: Union[bytes, BinaryIO],
    prefix: Union[str, Prefix] = "",
) -> Dict[str, Any]:
    """Store ``body`` at ``prefix + file_name`` in a single put request.

    No retry and no multipart upload, whatever the size.

    Returns:
        The store's put response

    Raises:
        StoreError: If the put request fails
    """
    key = Prefix.parse(prefix).key(file_name)
    content_type = guess_content_type(file_name)

    response = manager.call("put_object", Key=key, Body=body, ContentType=content_type)
    logger.info(
        "File uploaded",
        bucket=manager.bucket_name,
        key=key,
        content_type=content_type,
        etag=response.get("ETag"),
    )
    return response


def upload_path(
    manager: S3ClientManager,
    path: Union[str, Path],
    prefix: Union[str, Prefix] = "",
) -> Dict[str, Any]:
    """Upload a local file under its own base name."""
    path = Path(path)
    with path.open("rb") as handle:
        return upload_file(manager, path.name, handle, prefix)
