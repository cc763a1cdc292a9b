"""
Storage configuration using Pydantic settings.

Configuration is loaded from S3MEDIA_-prefixed environment variables
(or a .env file) with sensible defaults. Using Pydantic's BaseSettings
means we get type validation at startup, so a typo in the environment
fails before the first upload does.

Mock mode keeps media in memory and needs no credentials.
"""

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.models import AwsOptions, StorageOptions

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseSettings):
    """
    Storage settings loaded from environment variables.

    Every field maps to S3MEDIA_<FIELD>, e.g. S3MEDIA_BUCKET_NAME.
    """

    # Storage layout
    bucket_name: str = Field(
        default="",
        description="Bucket holding media objects"
    )
    key_prefix: str = Field(
        default="",
        description="Prepended to every object key, e.g. 'media' or 'uploads/cms'"
    )
    public_url_prefix: str = Field(
        default="",
        description="Base URL media is served from (bucket website, CloudFront, custom domain)"
    )

    # S3 connection
    region_name: Optional[str] = Field(
        default=None,
        description="AWS region. Falls back to the boto3 default chain."
    )
    profile_name: Optional[str] = Field(
        default=None,
        description="Named profile from the shared AWS config"
    )
    endpoint_url: Optional[str] = Field(
        default=None,
        description="Custom endpoint for S3-compatible stores (MinIO, R2)"
    )
    access_key_id: Optional[str] = Field(
        default=None,
        description="Static access key. Leave unset to use the default credential chain."
    )
    secret_access_key: Optional[str] = Field(
        default=None,
        description="Static secret key, paired with access_key_id"
    )
    mock_mode: bool = Field(
        default=False,
        description="Keep media in memory instead of S3. For local dev and tests."
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    model_config = SettingsConfigDict(
        env_prefix="S3MEDIA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def storage_options(self) -> StorageOptions:
        bucket_name = self.bucket_name or ("mock-bucket" if self.mock_mode else "")
        return StorageOptions(
            bucket_name=bucket_name,
            key_prefix=self.key_prefix,
            public_url_prefix=self.public_url_prefix,
        )

    def aws_options(self) -> AwsOptions:
        return AwsOptions(
            region_name=self.region_name,
            profile_name=self.profile_name,
            endpoint_url=self.endpoint_url,
            access_key_id=self.access_key_id,
            secret_access_key=self.secret_access_key,
        )

    def validate_required_fields(self) -> list[str]:
        """
        Validate that required fields are set based on mock mode.

        Returns list of missing required fields. This is separate from
        Pydantic validation because requirements depend on mock mode.
        """
        missing = []

        if not self.mock_mode and not self.bucket_name:
            missing.append("S3MEDIA_BUCKET_NAME")

        # Static credentials come in pairs
        if bool(self.access_key_id) != bool(self.secret_access_key):
            missing.append("S3MEDIA_ACCESS_KEY_ID and S3MEDIA_SECRET_ACCESS_KEY")

        return missing


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings don't change during runtime, so we load them once per
    process. For tests, call get_settings.cache_clear() to reset.
    """
    return Settings()


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure root logging for standalone use (scripts, local dev)."""
    settings = settings or get_settings()
    logging.basicConfig(
        format=LOG_FORMAT,
        level=settings.log_level.upper(),
    )
