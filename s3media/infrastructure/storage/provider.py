"""
S3 media storage provider.

Can be used with S3 bucket websites, CloudFront distributions fronting
S3 (optionally behind a custom domain), or any S3-compatible store.
The provider itself does no I/O: it holds configuration, derives keys
and URLs, and hands out sessions that talk to the object store.
"""

import logging
from typing import TYPE_CHECKING, Optional

from ...core.errors import ConfigurationError, InvalidReference
from ...core.models import AwsOptions, Media, StorageOptions
from ...core.urls import url_combine, url_path_encode
from .client import ObjectStore, create_object_store
from .session import S3StorageSession

if TYPE_CHECKING:
    from ...config.settings import Settings


class S3Storage:
    """
    Storage implementation for S3.

    Build it once at startup and share it. Every call to open() returns
    a fresh session; sessions share the provider's configuration and
    object store but nothing else.
    """

    def __init__(
        self,
        storage_options: Optional[StorageOptions],
        aws_options: Optional[AwsOptions] = None,
        logger: Optional[logging.Logger] = None,
        object_store: Optional[ObjectStore] = None,
        mock_mode: bool = False,
    ) -> None:
        if storage_options is None:
            raise ConfigurationError("storage_options is required")

        self._storage_options = storage_options
        self._aws_options = aws_options or AwsOptions()
        self._logger = logger or logging.getLogger(__name__)
        # Built once here so concurrent open() calls share one store.
        # Creating a boto3 client makes no network calls.
        if object_store is None:
            object_store = create_object_store(
                bucket_name=storage_options.bucket_name,
                aws_options=self._aws_options,
                mock_mode=mock_mode,
            )
        self._object_store = object_store

    @classmethod
    def from_settings(
        cls,
        settings: "Settings",
        logger: Optional[logging.Logger] = None,
    ) -> "S3Storage":
        """Build a provider from environment settings."""
        missing = settings.validate_required_fields()
        if missing:
            raise ConfigurationError(
                f"Missing required configuration: {', '.join(missing)}"
            )

        return cls(
            storage_options=settings.storage_options(),
            aws_options=settings.aws_options(),
            logger=logger,
            mock_mode=settings.mock_mode,
        )

    @property
    def storage_options(self) -> StorageOptions:
        return self._storage_options

    @property
    def aws_options(self) -> AwsOptions:
        return self._aws_options

    def open(self) -> S3StorageSession:
        """Open a new storage session."""
        self._logger.debug(
            "Opening S3 media storage session",
            extra={"bucket": self._storage_options.bucket_name}
        )
        return S3StorageSession(self, self._object_store, self._logger)

    def get_public_url(self, media: Optional[Media], filename: Optional[str]) -> Optional[str]:
        """
        Public URL for a media file, or None if the reference is incomplete.

        None is a normal answer here: the host asks for URLs of media that
        may not have been uploaded yet.
        """
        if media is None or not filename or not filename.strip():
            return None

        return url_combine(
            self._storage_options.public_url_prefix,
            str(media.id),
            url_path_encode(filename),
        )

    def get_resource_name(self, media: Optional[Media], filename: Optional[str]) -> str:
        """Object key for a media file."""
        if media is None:
            raise InvalidReference("media is required to build a resource name")
        if not filename or not filename.strip():
            raise InvalidReference("filename is required to build a resource name")

        return url_combine(
            self._storage_options.key_prefix,
            str(media.id),
            url_path_encode(filename),
        )
