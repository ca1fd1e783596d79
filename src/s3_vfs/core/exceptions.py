"""Exception hierarchy for s3-vfs."""

from typing import Optional


class S3VFSError(Exception):
    """Base exception for all s3-vfs errors."""

    pass


class ValidationError(S3VFSError):
    """Raised when a name, argument or setting is rejected before any store call."""

    pass


class ConflictError(S3VFSError):
    """Raised when the destination of a rename already exists."""

    def __init__(self, key: str):
        super().__init__(f"The destination file or folder already exists: {key}")
        self.key = key


class StoreError(S3VFSError):
    """Raised when a call to the object store fails."""

    def __init__(self, operation: str, message: str, code: Optional[str] = None):
        super().__init__(f"{operation} failed: {message}")
        self.operation = operation
        self.code = code
