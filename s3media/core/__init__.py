"""
Core media storage logic.

This module is framework-agnostic - it doesn't import boto3 or any
infrastructure concerns. Key and URL derivation, the error taxonomy and
the host-facing storage contract live here.
"""

from .errors import (
    ConfigurationError,
    InvalidReference,
    MediaStorageError,
    NotFound,
    SessionClosedError,
    StorageReadError,
    StorageWriteError,
)
from .models import AwsOptions, Media, StorageOptions, StoredObject
from .storage import Storage, StorageSession
from .urls import url_combine, url_path_encode

__all__ = [
    "AwsOptions",
    "ConfigurationError",
    "InvalidReference",
    "Media",
    "MediaStorageError",
    "NotFound",
    "SessionClosedError",
    "Storage",
    "StorageOptions",
    "StorageReadError",
    "StorageSession",
    "StorageWriteError",
    "StoredObject",
    "url_combine",
    "url_path_encode",
]
