"""Core utilities and shared components for s3-vfs."""

from .config import DEFAULT_FOLDERS, Settings, settings
from .exceptions import ConflictError, S3VFSError, StoreError, ValidationError
from .observability import get_logger, operation_context

__all__ = [
    "DEFAULT_FOLDERS",
    "Settings",
    "settings",
    "S3VFSError",
    "ValidationError",
    "ConflictError",
    "StoreError",
    "get_logger",
    "operation_context",
]
