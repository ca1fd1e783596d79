"""In-process memo for listing results."""

from typing import Any, Callable, Hashable, Optional, TypeVar

from cachetools import LRUCache

from s3_vfs.core import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

DEFAULT_MAXSIZE = 256


class ListingCache:
    """Results keyed by ``(kind, key)`` with no expiry.

    Entries stay until invalidated or, once ``maxsize`` distinct keys have
    been loaded, until they become the least recently used. Writers are
    expected to call :meth:`invalidate` after every successful mutation.
    """

    def __init__(self, maxsize: int = DEFAULT_MAXSIZE) -> None:
        self._entries: LRUCache = LRUCache(maxsize=maxsize)

    @property
    def maxsize(self) -> int:
        return int(self._entries.maxsize)

    def __contains__(self, item: tuple[str, Hashable]) -> bool:
        return item in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get_or_load(self, kind: str, key: Hashable, loader: Callable[[], T]) -> T:
        """Return the cached value, calling ``loader`` on a miss.

        Failed loads are not cached.
        """
        entry = (kind, key)
        if entry in self._entries:
            logger.debug("Listing cache hit", kind=kind, key=key)
            return self._entries[entry]

        logger.debug("Listing cache miss", kind=kind, key=key)
        value = loader()
        self._entries[entry] = value
        return value

    def invalidate(self, kind: Optional[str] = None) -> int:
        """Drop every entry of ``kind``, or everything if ``kind`` is None.

        Returns:
            Number of entries dropped
        """
        stale = [entry for entry in self._entries if kind is None or entry[0] == kind]
        for entry in stale:
            self._entries.pop(entry, None)

        logger.debug("Listing cache invalidated", kind=kind, dropped=len(stale))
        return len(stale)
