"""
s3media - S3 media storage for content-management systems.

This package contains the complete storage provider:
- core: Framework-agnostic models, key/URL derivation, errors and contract
- infrastructure: boto3 object stores, the provider and its sessions
- config: Environment configuration
"""

import logging

from .core import (
    AwsOptions,
    ConfigurationError,
    InvalidReference,
    Media,
    MediaStorageError,
    NotFound,
    SessionClosedError,
    Storage,
    StorageOptions,
    StorageReadError,
    StorageSession,
    StorageWriteError,
)
from .infrastructure.storage import S3Storage, S3StorageSession

__version__ = "0.1.0"

# Silent unless the host configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AwsOptions",
    "ConfigurationError",
    "InvalidReference",
    "Media",
    "MediaStorageError",
    "NotFound",
    "S3Storage",
    "S3StorageSession",
    "SessionClosedError",
    "Storage",
    "StorageOptions",
    "StorageReadError",
    "StorageSession",
    "StorageWriteError",
]
