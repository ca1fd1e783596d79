"""Name grammars for folders and files."""

import re
from typing import Optional

from s3_vfs.core.exceptions import ValidationError

# Characters never allowed anywhere in a folder name
_FORBIDDEN = r"\x00-\x1f\\?*:\";<>|/"

FOLDER_NAME_PATTERN = re.compile(
    rf"[^\s.{_FORBIDDEN}](?:[^{_FORBIDDEN}]*[^\s.{_FORBIDDEN}])?"
)
FILE_NAME_PATTERN = re.compile(r"[\w,\s-]+\.[A-Za-z]{3}", re.ASCII)


def is_valid_folder_name(name: Optional[str]) -> bool:
    """Check a folder name.

    Rejects empty names, control characters, any of ``\\ ? * : " ; < > | /``,
    and names starting or ending with whitespace or a period.
    """
    return bool(name) and FOLDER_NAME_PATTERN.fullmatch(name) is not None


def is_valid_file_name(name: Optional[str]) -> bool:
    """Check a file name of the form ``stem.ext`` with a three-letter extension."""
    return bool(name) and FILE_NAME_PATTERN.fullmatch(name.strip()) is not None


def validate_folder_name(name: Optional[str]) -> str:
    if not is_valid_folder_name(name):
        raise ValidationError(f"Invalid folder name: {name!r}")
    return (name or "").strip()


def validate_file_name(name: Optional[str]) -> str:
    if not is_valid_file_name(name):
        raise ValidationError(f"Invalid file name: {name!r}")
    return (name or "").strip()
