"""
Object storage integration for media assets.

Supports AWS S3 and S3-compatible stores (MinIO, R2) via boto3.
Includes mock mode for local development without credentials.
"""

from .client import MockObjectStore, ObjectStore, S3ObjectStore, create_object_store
from .provider import S3Storage
from .session import S3StorageSession

__all__ = [
    "MockObjectStore",
    "ObjectStore",
    "S3ObjectStore",
    "S3Storage",
    "S3StorageSession",
    "create_object_store",
]
