"""Shared fixtures for storage tests."""

from uuid import UUID

import pytest

from s3media.core.models import Media, StorageOptions
from s3media.infrastructure.storage.client import MockObjectStore
from s3media.infrastructure.storage.provider import S3Storage

MEDIA_ID = UUID("6f1c2d3e-4b5a-4c6d-8e7f-9a0b1c2d3e4f")


@pytest.fixture
def media() -> Media:
    """A media reference with a fixed id so expected keys are readable."""
    return Media(id=MEDIA_ID, filename="logo.png")


@pytest.fixture
def storage_options() -> StorageOptions:
    return StorageOptions(
        bucket_name="cms-media",
        key_prefix="uploads",
        public_url_prefix="https://cdn.example.com/media/",
    )


@pytest.fixture
def object_store() -> MockObjectStore:
    return MockObjectStore("cms-media")


@pytest.fixture
def storage(storage_options: StorageOptions, object_store: MockObjectStore) -> S3Storage:
    """Provider wired to the in-memory store."""
    return S3Storage(storage_options, object_store=object_store)
