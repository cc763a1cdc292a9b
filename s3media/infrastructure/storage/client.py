"""
Object store clients for media bytes.

Supports AWS S3 and S3-compatible stores (MinIO, R2) through boto3,
plus an in-memory mock for local development without credentials.

The clients know about buckets and keys, nothing about media or URLs.
Translating media references into keys is the provider's job.
"""

import asyncio
import logging
from typing import Optional, Protocol

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from ...core.errors import ConfigurationError, NotFound, StorageReadError, StorageWriteError
from ...core.models import AwsOptions, StoredObject

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"

# head_object reports a bare "404", get_object reports "NoSuchKey"
_NOT_FOUND_CODES = {"404", "NoSuchKey", "NotFound"}


class ObjectStore(Protocol):
    """
    Protocol for key-level object operations within one bucket.

    Using a protocol means sessions can run against the mock in tests
    and against S3 in production without changing session code.
    """

    @property
    def bucket_name(self) -> str:
        ...

    async def exists(self, key: str) -> bool:
        """Whether the key is present."""
        ...

    async def get(self, key: str) -> bytes:
        """Object bytes. Raises NotFound when the key is absent."""
        ...

    async def put(self, key: str, data: bytes, content_type: str) -> None:
        """Create or overwrite the object."""
        ...

    async def delete(self, key: str) -> None:
        """Delete the object. Silent when the key is absent."""
        ...


def _is_not_found(error: ClientError) -> bool:
    response = error.response or {}
    code = str(response.get("Error", {}).get("Code", ""))
    status = response.get("ResponseMetadata", {}).get("HTTPStatusCode")
    return code in _NOT_FOUND_CODES or status == 404


def build_s3_client(aws_options: Optional[AwsOptions] = None):
    """
    Create a boto3 S3 client from connection options.

    Custom endpoints (MinIO, R2, localstack) need path-style addressing
    and v4 signatures, so we only force those when an endpoint is set.
    """
    options = aws_options or AwsOptions()

    session = boto3.session.Session(
        profile_name=options.profile_name,
        region_name=options.region_name,
    )

    client_kwargs = {}
    if options.endpoint_url:
        client_kwargs["endpoint_url"] = options.endpoint_url
        client_kwargs["config"] = Config(
            signature_version="s3v4",
            s3={"addressing_style": "path"},
        )
    if options.has_static_credentials:
        client_kwargs["aws_access_key_id"] = options.access_key_id
        client_kwargs["aws_secret_access_key"] = options.secret_access_key

    return session.client("s3", **client_kwargs)


class S3ObjectStore:
    """
    S3 object store backed by boto3.

    boto3 is synchronous, so every call runs in a worker thread via
    asyncio.to_thread. That keeps the event loop free while a large
    upload is in flight.
    """

    def __init__(
        self,
        bucket_name: str,
        aws_options: Optional[AwsOptions] = None,
        client=None,
    ) -> None:
        if not bucket_name:
            raise ConfigurationError("bucket_name is required for S3 storage")

        self._bucket_name = bucket_name
        self._client = client if client is not None else build_s3_client(aws_options)

        logger.info(
            "Initialized S3 object store",
            extra={
                "bucket": bucket_name,
                "endpoint": aws_options.endpoint_url if aws_options else None,
            }
        )

    @property
    def bucket_name(self) -> str:
        return self._bucket_name

    async def exists(self, key: str) -> bool:
        try:
            await asyncio.to_thread(
                self._client.head_object,
                Bucket=self._bucket_name,
                Key=key,
            )
            return True

        except ClientError as e:
            if _is_not_found(e):
                return False
            logger.error(
                "Failed to check object",
                extra={"key": key, "error": str(e)}
            )
            raise StorageReadError(f"Existence check failed: {e}", key=key) from e

        except BotoCoreError as e:
            logger.error(
                "Failed to check object",
                extra={"key": key, "error": str(e)}
            )
            raise StorageReadError(f"Existence check failed: {e}", key=key) from e

    async def get(self, key: str) -> bytes:
        try:
            return await asyncio.to_thread(self._read_object, key)

        except ClientError as e:
            if _is_not_found(e):
                raise NotFound(f"Object not found: {key}", key=key) from e
            logger.error(
                "Failed to download object",
                extra={"key": key, "error": str(e)}
            )
            raise StorageReadError(f"Download failed: {e}", key=key) from e

        except BotoCoreError as e:
            logger.error(
                "Failed to download object",
                extra={"key": key, "error": str(e)}
            )
            raise StorageReadError(f"Download failed: {e}", key=key) from e

    async def put(self, key: str, data: bytes, content_type: str) -> None:
        try:
            await asyncio.to_thread(
                self._client.put_object,
                Bucket=self._bucket_name,
                Key=key,
                Body=data,
                ContentType=content_type or DEFAULT_CONTENT_TYPE,
            )

            logger.debug(
                "Uploaded object",
                extra={
                    "key": key,
                    "content_type": content_type,
                    "size_bytes": len(data),
                }
            )

        except (ClientError, BotoCoreError) as e:
            logger.error(
                "Failed to upload object",
                extra={"key": key, "error": str(e)}
            )
            raise StorageWriteError(f"Upload failed: {e}", key=key) from e

    async def delete(self, key: str) -> None:
        try:
            await asyncio.to_thread(
                self._client.delete_object,
                Bucket=self._bucket_name,
                Key=key,
            )

            logger.debug("Deleted object", extra={"key": key})

        except (ClientError, BotoCoreError) as e:
            logger.error(
                "Failed to delete object",
                extra={"key": key, "error": str(e)}
            )
            raise StorageWriteError(f"Delete failed: {e}", key=key) from e

    def _read_object(self, key: str) -> bytes:
        # Reading the body is blocking network I/O too, so it stays in the thread
        response = self._client.get_object(Bucket=self._bucket_name, Key=key)
        return response["Body"].read()


# ---------------------------------------------------------------------------
# Mock Storage for Local Development
# ---------------------------------------------------------------------------

class MockObjectStore:
    """
    In-memory object store for local development.

    Objects are kept in a dictionary keyed by object key. Not suitable
    for production, but it lets the whole provider run without S3.
    """

    def __init__(self, bucket_name: str = "mock-bucket") -> None:
        self._bucket_name = bucket_name
        self._objects: dict[str, StoredObject] = {}
        logger.info("Initialized mock object store (in-memory)")

    @property
    def bucket_name(self) -> str:
        return self._bucket_name

    @property
    def objects(self) -> dict[str, StoredObject]:
        """Snapshot of stored objects, for inspection in tests."""
        return dict(self._objects)

    async def exists(self, key: str) -> bool:
        return key in self._objects

    async def get(self, key: str) -> bytes:
        if key not in self._objects:
            raise NotFound(f"Object not found: {key}", key=key)
        return self._objects[key].data

    async def put(self, key: str, data: bytes, content_type: str) -> None:
        stored = StoredObject(
            key=key,
            data=bytes(data),
            content_type=content_type or DEFAULT_CONTENT_TYPE,
        )
        self._objects[key] = stored

        logger.debug(
            "Stored object in mock storage",
            extra={"key": key, "size_bytes": stored.size_bytes}
        )

    async def delete(self, key: str) -> None:
        self._objects.pop(key, None)


# ---------------------------------------------------------------------------
# Factory Function
# ---------------------------------------------------------------------------

def create_object_store(
    bucket_name: Optional[str] = None,
    aws_options: Optional[AwsOptions] = None,
    mock_mode: bool = False,
) -> ObjectStore:
    """
    Create an object store based on configuration.

    Args:
        bucket_name: Target bucket (required if not mock_mode)
        aws_options: Connection options for the S3 client
        mock_mode: If True, return the in-memory store

    Returns:
        ObjectStore implementation (S3 or Mock)
    """
    if mock_mode:
        return MockObjectStore(bucket_name or "mock-bucket")

    if not bucket_name:
        raise ConfigurationError("bucket_name is required when not in mock mode")

    return S3ObjectStore(bucket_name, aws_options)
