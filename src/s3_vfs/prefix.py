"""Virtual directory paths over a flat object key space.

S3 has no directories, only keys. A folder is emulated by the convention that
keys sharing a ``/``-terminated prefix belong to the same directory. The
:class:`Prefix` value type keeps that convention in one place so call sites do
not slice strings by hand.

Example:
    >>> docs = Prefix.parse("users/alice")
    >>> str(docs)
    'users/alice/'
    >>> docs.child("Legal documents").name
    'Legal documents'
    >>> docs.parent
    Prefix(value='users/')
"""

from dataclasses import dataclass
from typing import Union

DELIMITER = "/"


@dataclass(frozen=True)
class Prefix:
    """A virtual directory. The root is ``""``; any other value ends in ``/``."""

    value: str = ""

    def __post_init__(self):
        if self.value and not self.value.endswith(DELIMITER):
            raise ValueError(f"Prefix must be empty or end with '{DELIMITER}': {self.value!r}")

    @classmethod
    def parse(cls, raw: Union[str, "Prefix", None]) -> "Prefix":
        """Build a prefix from user input, adding the trailing delimiter if missing.

        Leading delimiters are kept: ``"/docs"`` and ``"docs"`` are different
        folders in the bucket.
        """
        if isinstance(raw, Prefix):
            return raw
        path = raw or ""
        if path and not path.endswith(DELIMITER):
            path += DELIMITER
        return cls(path)

    @classmethod
    def root(cls) -> "Prefix":
        return cls("")

    @property
    def is_root(self) -> bool:
        return not self.value

    @property
    def name(self) -> str:
        """Display name: last segment without the trailing delimiter."""
        if self.is_root:
            return ""
        return self.value[:-1].rsplit(DELIMITER, 1)[-1]

    @property
    def parent(self) -> "Prefix":
        if self.is_root:
            return self
        head, sep, _ = self.value[:-1].rpartition(DELIMITER)
        return Prefix(head + sep)

    def child(self, name: str) -> "Prefix":
        """Sub-folder prefix for ``name``."""
        return Prefix(f"{self.value}{name}{DELIMITER}")

    def key(self, name: str) -> str:
        """Object key for a file called ``name`` in this folder."""
        return f"{self.value}{name}"

    def contains(self, key: str) -> bool:
        return key.startswith(self.value)

    def relative(self, key: str) -> str:
        """Strip this prefix from ``key``."""
        if not self.contains(key):
            raise ValueError(f"Key {key!r} is not under prefix {self.value!r}")
        return key[len(self.value):]

    @staticmethod
    def rebase(key: str, source: str, destination: str) -> str:
        """Move ``key`` from under ``source`` to under ``destination``."""
        if not key.startswith(source):
            raise ValueError(f"Key {key!r} is not under {source!r}")
        return destination + key[len(source):]

    def __str__(self) -> str:
        return self.value
