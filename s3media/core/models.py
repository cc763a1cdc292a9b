"""
Domain models for media storage.

These are plain values: configuration objects built once at startup and
the media reference the host hands us per call. None of them know about
boto3 or S3, which keeps the key/URL logic testable in isolation.
"""

from dataclasses import dataclass, field
from typing import Optional
from uuid import UUID, uuid4

from .errors import ConfigurationError


@dataclass(frozen=True)
class Media:
    """
    A reference to one logical asset owned by the host CMS.

    We only ever derive strings from it. The host owns the lifecycle.
    """
    id: UUID = field(default_factory=uuid4)
    filename: str = ""


@dataclass(frozen=True)
class StorageOptions:
    """
    Where media objects live and how they are addressed publicly.

    Frozen because the provider reads these for its whole lifetime and
    sessions share them across threads.
    """
    bucket_name: str
    key_prefix: str = ""
    public_url_prefix: str = ""  # e.g. a CloudFront or S3 website URL

    def __post_init__(self) -> None:
        if not self.bucket_name or not self.bucket_name.strip():
            raise ConfigurationError("bucket_name is required")


@dataclass(frozen=True)
class AwsOptions:
    """
    Connection parameters for the S3 client.

    Anything left as None falls through to boto3's default resolution
    (environment, shared config, instance profile).
    """
    region_name: Optional[str] = None
    profile_name: Optional[str] = None
    endpoint_url: Optional[str] = None  # MinIO, R2, localstack
    access_key_id: Optional[str] = None
    secret_access_key: Optional[str] = None

    @property
    def has_static_credentials(self) -> bool:
        return bool(self.access_key_id and self.secret_access_key)


@dataclass(frozen=True)
class StoredObject:
    """An object as held by the in-memory store."""
    key: str
    data: bytes
    content_type: str = "application/octet-stream"

    @property
    def size_bytes(self) -> int:
        return len(self.data)
