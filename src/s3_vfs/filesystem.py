"""Filesystem facade over one S3 bucket.

:class:`S3FileSystem` is the entry point for callers such as the CLI. It reads
through a :class:`~s3_vfs.cache.ListingCache` and, after each successful
mutation, invalidates every cached listing so the next read reflects the
change. Failed mutations are logged and re-raised, and the cache is left as it
was.
"""

from pathlib import Path
from typing import Any, BinaryIO, Callable, Dict, Optional, TypeVar, Union

from s3_vfs.cache import ListingCache
from s3_vfs.core import DEFAULT_FOLDERS, get_logger, operation_context
from s3_vfs.core.config import Settings
from s3_vfs.objectstorage import copying, deletion, folders, listing, upload
from s3_vfs.objectstorage.clients import S3ClientConfig, S3ClientManager
from s3_vfs.prefix import Prefix
from s3_vfs.schemas import DirectoryListing

logger = get_logger(__name__)

T = TypeVar("T")

CONTENTS = "contents"

PrefixLike = Union[str, Prefix]


class S3FileSystem:
    """Folder-style operations on a bucket with cached listings."""

    def __init__(
        self,
        manager: S3ClientManager,
        exclude_pattern: Optional[str] = None,
        default_folders: Optional[list[str]] = None,
        cache: Optional[ListingCache] = None,
    ):
        self.manager = manager
        self.exclusion = listing.compile_exclusion(exclude_pattern)
        self.default_folders = list(
            DEFAULT_FOLDERS if default_folders is None else default_folders
        )
        self.cache = cache if cache is not None else ListingCache()

    @classmethod
    def from_settings(cls, settings: Settings, client: Any = None) -> "S3FileSystem":
        """Build a filesystem from environment settings.

        Raises:
            ValidationError: If no bucket is configured
        """
        manager = S3ClientManager(S3ClientConfig.from_settings(settings), client=client)
        return cls(
            manager,
            exclude_pattern=settings.exclude_pattern,
            default_folders=settings.default_folders,
            cache=ListingCache(maxsize=settings.cache_size),
        )

    @property
    def bucket_name(self) -> str:
        return self.manager.bucket_name

    def list_contents(self, prefix: PrefixLike = "") -> DirectoryListing:
        """Immediate children of ``prefix``, served from cache when possible."""
        prefix = Prefix.parse(prefix)
        return self.cache.get_or_load(
            CONTENTS,
            prefix.value,
            lambda: listing.list_directory(self.manager, prefix, self.exclusion),
        )

    def refresh(self) -> None:
        self.cache.invalidate(CONTENTS)

    def ensure_default_folders(self, root: PrefixLike = "") -> list[str]:
        return self._mutate(
            "ensure_default_folders",
            lambda: folders.ensure_default_folders(
                self.manager, root, self.default_folders
            ),
            prefix=str(root),
        )

    def create_folder(self, folder_name: str, current_prefix: PrefixLike = "") -> str:
        return self._mutate(
            "create_folder",
            lambda: folders.create_folder(self.manager, folder_name, current_prefix),
            prefix=str(current_prefix),
            name=folder_name,
        )

    def delete(self, prefix: PrefixLike, allow_root: bool = False) -> int:
        return self._mutate(
            "delete",
            lambda: deletion.delete_prefix(self.manager, prefix, allow_root=allow_root),
            prefix=str(prefix),
        )

    def copy(self, source_key: str, destination_key: str) -> int:
        return self._mutate(
            "copy",
            lambda: copying.copy_key(self.manager, source_key, destination_key),
            source=source_key,
            destination=destination_key,
        )

    def rename(
        self,
        old_name: str,
        new_name: str,
        is_folder: bool = False,
        current_prefix: PrefixLike = "",
    ) -> Optional[str]:
        return self._mutate(
            "rename",
            lambda: copying.rename(
                self.manager, old_name, new_name, is_folder, current_prefix
            ),
            prefix=str(current_prefix),
            source=old_name,
            destination=new_name,
        )

    def upload(
        self, file_name: str, body: Union[bytes, BinaryIO], prefix: PrefixLike = ""
    ) -> Dict[str, Any]:
        return self._mutate(
            "upload",
            lambda: upload.upload_file(self.manager, file_name, body, prefix),
            prefix=str(prefix),
            name=file_name,
        )

    def upload_path(self, path: Union[str, Path], prefix: PrefixLike = "") -> Dict[str, Any]:
        return self._mutate(
            "upload",
            lambda: upload.upload_path(self.manager, path, prefix),
            prefix=str(prefix),
            name=str(path),
        )

    def _mutate(self, operation: str, action: Callable[[], T], **fields: Any) -> T:
        with operation_context(operation, self.bucket_name, **fields):
            try:
                result = action()
            except Exception as e:
                logger.error(
                    f"Failed to {operation.replace('_', ' ')}",
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise

        self.cache.invalidate(CONTENTS)
        return result
