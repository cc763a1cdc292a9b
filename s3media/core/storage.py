"""
The storage contract the host CMS depends on.

The host never imports a concrete provider. It asks for something that
satisfies Storage, opens a session, and works against StorageSession.
Using Protocols means a filesystem provider, the S3 provider, or a test
double are all interchangeable without inheritance.
"""

from types import TracebackType
from typing import BinaryIO, Optional, Protocol, Union, runtime_checkable

from .models import Media

Content = Union[bytes, BinaryIO]


@runtime_checkable
class StorageSession(Protocol):
    """
    A short-lived handle for object I/O.

    Opened for one logical operation (one upload, one delete) and closed
    afterwards. Nothing it starts outlives close().
    """

    async def exists(self, key: str) -> bool:
        """Whether an object with this key is stored."""
        ...

    async def open(self, key: str) -> BinaryIO:
        """Readable stream over the object's bytes. Raises NotFound."""
        ...

    async def save(self, key: str, content: Content, content_type: str) -> None:
        """Write or overwrite the object. Raises StorageWriteError."""
        ...

    async def delete(self, key: str) -> None:
        """Remove the object. Raises NotFound if it is absent."""
        ...

    async def put(
        self,
        media: Media,
        filename: str,
        content_type: str,
        content: Content,
    ) -> str:
        """Store a media file and return its public address."""
        ...

    async def get(self, media: Media, filename: str, stream: BinaryIO) -> bool:
        """Copy a media file into stream. False when it is absent."""
        ...

    async def remove(self, media: Media, filename: str) -> bool:
        """Delete a media file. False when it is absent."""
        ...

    async def close(self) -> None:
        ...

    async def __aenter__(self) -> "StorageSession":
        ...

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        ...


@runtime_checkable
class Storage(Protocol):
    """Process-wide factory for storage sessions."""

    def open(self) -> StorageSession:
        ...

    def get_public_url(self, media: Optional[Media], filename: Optional[str]) -> Optional[str]:
        ...

    def get_resource_name(self, media: Optional[Media], filename: Optional[str]) -> str:
        ...
