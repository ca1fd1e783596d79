"""Filesystem operations over an S3 bucket."""

from .clients import S3ClientConfig, S3ClientManager
from .copying import copy_key, rename
from .deletion import DELETE_BATCH_SIZE, delete_prefix
from .folders import create_folder, ensure_default_folders
from .listing import list_directory, object_url
from .upload import guess_content_type, upload_file, upload_path

__all__ = [
    "DELETE_BATCH_SIZE",
    "S3ClientConfig",
    "S3ClientManager",
    "copy_key",
    "create_folder",
    "delete_prefix",
    "ensure_default_folders",
    "guess_content_type",
    "list_directory",
    "object_url",
    "rename",
    "upload_file",
    "upload_path",
]
