"""Configuration management for s3-vfs."""

import re
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

DEFAULT_FOLDERS = [
    "Health records",
    "Contractual agreements",
    "Bills & Receipts",
    "Financial documents",
    "Care payments",
    "Advance care planning",
    "Legal documents",
]


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    aws_region: str = "us-east-1"
    aws_access_key_id: Optional[str] = None
    aws_secret_access_key: Optional[str] = None
    aws_session_token: Optional[str] = None
    aws_profile: Optional[str] = None
    endpoint_url: Optional[str] = None
    bucket_name: Optional[str] = None

    # Keys and prefixes matching this pattern are hidden from listings
    exclude_pattern: Optional[str] = None
    default_folders: list[str] = DEFAULT_FOLDERS
    # Most distinct listings kept in memory between mutations
    cache_size: int = Field(default=256, ge=1)

    log_level: str = "INFO"
    otel_enabled: bool = False
    otel_service_name: str = "s3-vfs"

    model_config = {
        "env_prefix": "S3VFS_",
        "case_sensitive": False,
    }

    @field_validator("exclude_pattern")
    @classmethod
    def _check_pattern(cls, value: Optional[str]) -> Optional[str]:
        if value:
            try:
                re.compile(value)
            except re.error as e:
                raise ValueError(f"Invalid exclude pattern '{value}': {e}")
        return value or None


settings = Settings()
