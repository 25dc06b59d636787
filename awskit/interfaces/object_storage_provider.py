"""Abstract base class for object-storage providers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import AsyncIterator

from awskit.models.storage import ListObjectsParams, ObjectInfo


# Concrete implementation: S3StorageProvider (awskit/providers/storage/)
class IObjectStorageProvider(ABC):
    """Contract for bucket/key object stores.

    All failures are raised as :class:`~awskit.utils.errors.StorageError`.
    """

    @abstractmethod
    async def get(self, bucket: str, key: str) -> bytes:
        """Return the full content of the object at *key*."""

    @abstractmethod
    async def info(self, bucket: str, key: str) -> ObjectInfo:
        """Return object metadata without fetching the content."""

    @abstractmethod
    async def put(self, bucket: str, key: str, data: bytes) -> None:
        """Store *data* at *key*, replacing any existing object."""

    @abstractmethod
    async def delete(self, bucket: str, key: str) -> None:
        """Delete the object at *key*."""

    @abstractmethod
    async def delete_folder(self, bucket: str, folder: str) -> None:
        """Delete every object under *folder* and then the folder key itself."""

    @abstractmethod
    async def list(
        self, bucket: str, prefix: str, params: ListObjectsParams | None = None
    ) -> list[str]:
        """Return the keys under *prefix*, or common prefixes if a delimiter is set."""

    @abstractmethod
    async def list_tags(
        self, bucket: str, prefix: str, params: ListObjectsParams | None = None
    ) -> tuple[list[str], list[str]]:
        """Return ``(keys, etags)`` under *prefix*, index-aligned."""

    @abstractmethod
    def iter_keys(self, bucket: str, prefix: str) -> AsyncIterator[str]:
        """Yield the keys under *prefix* one at a time."""
