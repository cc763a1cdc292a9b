"""
Error taxonomy for media storage.

Every failure the provider or a session surfaces derives from
MediaStorageError, so hosts can catch one base class. Backend errors
are chained (raise ... from e) so the SDK's original exception stays
available for debugging.
"""

from typing import Optional


class MediaStorageError(Exception):
    """Base class for all media storage failures."""
    pass


class ConfigurationError(MediaStorageError):
    """Raised when required configuration is missing or invalid."""
    pass


class InvalidReference(MediaStorageError):
    """Raised when a required media reference or filename is absent."""
    pass


class SessionClosedError(MediaStorageError):
    """Raised when an operation is attempted on a closed session."""
    pass


class ObjectError(MediaStorageError):
    """A failure tied to a single object key."""

    def __init__(self, message: str, key: Optional[str] = None) -> None:
        super().__init__(message)
        self.key = key


class NotFound(ObjectError):
    """Raised when the requested object key does not exist."""
    pass


class StorageReadError(ObjectError):
    """Raised when reading from the backend fails."""
    pass


class StorageWriteError(ObjectError):
    """Raised when writing to or deleting from the backend fails."""
    pass
