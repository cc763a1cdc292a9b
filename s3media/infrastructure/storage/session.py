"""
Storage sessions: per-operation handles for object I/O.

A session is opened by S3Storage.open(), used for one logical operation
(an upload, a thumbnail regeneration, a delete) and closed afterwards.
It holds nothing of its own besides the closed flag; configuration
comes from the provider and bytes go through the object store.
"""

import io
import logging
from types import TracebackType
from typing import TYPE_CHECKING, BinaryIO, Optional

from ...core.errors import NotFound, SessionClosedError
from ...core.models import Media
from ...core.storage import Content
from .client import ObjectStore

if TYPE_CHECKING:
    from .provider import S3Storage


class S3StorageSession:
    """
    StorageSession implementation over an ObjectStore.

    Usage:
        async with storage.open() as session:
            url = await session.put(media, "logo.png", "image/png", data)
    """

    def __init__(
        self,
        storage: "S3Storage",
        object_store: ObjectStore,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._storage = storage
        self._store = object_store
        self._logger = logger or logging.getLogger(__name__)
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    # -----------------------------------------------------------------------
    # Key-level operations
    # -----------------------------------------------------------------------

    async def exists(self, key: str) -> bool:
        self._ensure_open()
        return await self._store.exists(key)

    async def open(self, key: str) -> BinaryIO:
        """
        Return a readable stream over the object's bytes.

        The stream is an in-memory copy positioned at the start, so it
        stays valid after the session is closed.
        """
        self._ensure_open()
        data = await self._store.get(key)
        return io.BytesIO(data)

    async def save(self, key: str, content: Content, content_type: str) -> None:
        """
        Write content under key, overwriting any existing object.

        Saving the same bytes twice leaves the same object behind.
        """
        self._ensure_open()
        data = _read_content(content)
        await self._store.put(key, data, content_type)

        self._logger.debug(
            "Saved media object",
            extra={
                "key": key,
                "bucket": self._store.bucket_name,
                "size_bytes": len(data),
            }
        )

    async def delete(self, key: str) -> None:
        """
        Delete the object stored under key.

        S3 deletes are silent for missing keys, so we check first and
        raise NotFound to keep the contract the same on every backend.

        Without s3:ListBucket, S3 answers HEAD on a missing key with 403
        rather than 404. The check then raises StorageReadError, not
        NotFound, since a missing key and a forbidden one look the same.
        """
        self._ensure_open()
        if not await self._store.exists(key):
            raise NotFound(f"Object not found: {key}", key=key)
        await self._store.delete(key)

        self._logger.debug(
            "Deleted media object",
            extra={"key": key, "bucket": self._store.bucket_name}
        )

    # -----------------------------------------------------------------------
    # Media-level operations
    # -----------------------------------------------------------------------

    async def put(
        self,
        media: Media,
        filename: str,
        content_type: str,
        content: Content,
    ) -> str:
        """
        Store a media file and return the address the host should publish.

        That is the public URL when a public prefix is configured, and
        the resource name otherwise.
        """
        key = self._storage.get_resource_name(media, filename)
        await self.save(key, content, content_type)

        if not self._storage.storage_options.public_url_prefix:
            return key
        return self._storage.get_public_url(media, filename)

    async def get(self, media: Media, filename: str, stream: BinaryIO) -> bool:
        key = self._storage.get_resource_name(media, filename)
        self._ensure_open()
        try:
            data = await self._store.get(key)
        except NotFound:
            return False

        stream.write(data)
        return True

    async def remove(self, media: Media, filename: str) -> bool:
        key = self._storage.get_resource_name(media, filename)
        try:
            await self.delete(key)
        except NotFound:
            return False
        return True

    # -----------------------------------------------------------------------
    # Lifetime
    # -----------------------------------------------------------------------

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._logger.debug("Closed S3 media storage session")

    async def __aenter__(self) -> "S3StorageSession":
        self._ensure_open()
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        await self.close()

    def _ensure_open(self) -> None:
        if self._closed:
            raise SessionClosedError("Storage session is closed")


def _read_content(content: Content) -> bytes:
    """Normalize bytes or a binary stream into bytes."""
    if isinstance(content, (bytes, bytearray, memoryview)):
        return bytes(content)
    if isinstance(content, str):
        raise TypeError("content must be bytes or a binary stream, not str")

    data = content.read()
    if isinstance(data, str):
        raise TypeError("content stream must be opened in binary mode")
    return data
