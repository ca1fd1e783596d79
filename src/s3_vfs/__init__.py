"""Folder-style file management over a single S3 bucket.

S3 stores flat keys. This package emulates directories on top of them using
the ``/`` delimiter convention and zero-byte folder marker objects.

Key Features:
    - Directory listing with exclusion filtering
    - Folder creation and default-folder seeding
    - Recursive delete, copy, and rename/move
    - Upload with content-type inference
    - Cached listings invalidated after every mutation
    - CLI interface

Recommended Usage:
    Use the filesystem facade for most operations:

    >>> from s3_vfs import S3FileSystem, settings
    >>> fs = S3FileSystem.from_settings(settings)
    >>> fs.ensure_default_folders("users/alice/")
    >>> listing = fs.list_contents("users/alice/")

Advanced Usage:
    The uncached store operations take an explicit client manager:

    >>> from s3_vfs.objectstorage import S3ClientConfig, S3ClientManager, delete_prefix
    >>> manager = S3ClientManager(S3ClientConfig(bucket_name="family-documents"))
    >>> delete_prefix(manager, "users/alice/Old stuff/")
"""

__version__ = "0.1.0"

from .cache import ListingCache
from .core import (
    DEFAULT_FOLDERS,
    ConflictError,
    S3VFSError,
    Settings,
    StoreError,
    ValidationError,
    settings,
)
from .filesystem import S3FileSystem
from .naming import is_valid_file_name, is_valid_folder_name
from .objectstorage import S3ClientConfig, S3ClientManager
from .prefix import Prefix
from .schemas import DirectoryListing, FolderEntry, ObjectEntry

__all__ = [
    # Facade
    "S3FileSystem",
    "ListingCache",
    # Configuration
    "DEFAULT_FOLDERS",
    "Settings",
    "settings",
    "S3ClientConfig",
    "S3ClientManager",
    # Errors
    "S3VFSError",
    "ValidationError",
    "ConflictError",
    "StoreError",
    # Values
    "Prefix",
    "DirectoryListing",
    "FolderEntry",
    "ObjectEntry",
    "is_valid_file_name",
    "is_valid_folder_name",
]
