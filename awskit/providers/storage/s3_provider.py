"""Amazon S3 object-storage provider using boto3.

Implements IObjectStorageProvider as a thin adapter over the S3 client.
boto3 is synchronous, so every call is pushed to a worker thread with
``asyncio.to_thread``; the client itself is thread-safe and shared.
"""

from __future__ import annotations

import asyncio
from typing import Any, AsyncIterator

from botocore.exceptions import BotoCoreError, ClientError

from awskit.interfaces.object_storage_provider import IObjectStorageProvider
from awskit.models.storage import ListObjectsParams, ObjectInfo
from awskit.utils.errors import StorageError
from awskit.utils.logging import get_logger


def _error_code(exc: Exception) -> str | None:
    if isinstance(exc, ClientError):
        return exc.response.get("Error", {}).get("Code")
    return None


class S3StorageProvider(IObjectStorageProvider):
    """Object storage backed by an S3 (or S3-compatible) bucket.

    Parameters
    ----------
    client:
        A boto3 ``s3`` client.  Construction is left to the caller (see
        ``awskit.main.build_clients``) so region, credentials, and endpoint
        are decided in one place.
    """

    def __init__(self, client: Any) -> None:
        self._client = client
        self._logger = get_logger(__name__)

    # -- Private helpers -------------------------------------------------------

    def _wrap(self, exc: Exception, message: str) -> StorageError:
        return StorageError(
            message=f"{message}, error: {exc}",
            provider_name=self.get_provider_name(),
            code=_error_code(exc),
        )

    def _get_sync(self, bucket: str, key: str) -> bytes:
        response = self._client.get_object(Bucket=bucket, Key=key)
        body = response["Body"]
        try:
            return body.read()
        finally:
            body.close()

    def _list_objects_sync(
        self, bucket: str, prefix: str, params: ListObjectsParams | None
    ) -> dict[str, Any]:
        request: dict[str, Any] = {"Bucket": bucket, "Prefix": prefix}
        if params is not None:
            request.update(params.to_request())
        return self._client.list_objects(**request)

    async def _list_objects(
        self, bucket: str, prefix: str, params: ListObjectsParams | None
    ) -> dict[str, Any]:
        try:
            return await asyncio.to_thread(self._list_objects_sync, bucket, prefix, params)
        except (ClientError, BotoCoreError) as exc:
            self._logger.error("s3_list_failed", bucket=bucket, prefix=prefix, error=str(exc))
            raise self._wrap(
                exc, f"got an error getting s3 objects list from bucket {bucket} prefix {prefix}"
            ) from exc

    @staticmethod
    def _contents(response: dict[str, Any], prefix: str) -> list[dict[str, Any]]:
        # The folder marker object itself is not part of its own listing.
        return [obj for obj in response.get("Contents", []) if obj.get("Key") != prefix]

    # -- IObjectStorageProvider implementation ---------------------------------

    async def get(self, bucket: str, key: str) -> bytes:
        """Return the content of the object at *key*."""
        try:
            data = await asyncio.to_thread(self._get_sync, bucket, key)
        except (ClientError, BotoCoreError) as exc:
            self._logger.error("s3_get_failed", bucket=bucket, key=key, error=str(exc))
            raise self._wrap(exc, f"got an error getting s3 object {key}") from exc

        self._logger.debug("s3_get_complete", bucket=bucket, key=key, size=len(data))
        return data

    async def info(self, bucket: str, key: str) -> ObjectInfo:
        """Return metadata of the object at *key* (``HeadObject``)."""
        try:
            response = await asyncio.to_thread(self._client.head_object, Bucket=bucket, Key=key)
        except (ClientError, BotoCoreError) as exc:
            raise self._wrap(exc, f"got an error getting s3 object {key} info") from exc
        return ObjectInfo.from_head(key, response)

    async def put(self, bucket: str, key: str, data: bytes) -> None:
        """Store *data* at *key*."""
        try:
            await asyncio.to_thread(self._client.put_object, Bucket=bucket, Key=key, Body=data)
        except (ClientError, BotoCoreError) as exc:
            self._logger.error("s3_put_failed", bucket=bucket, key=key, error=str(exc))
            raise self._wrap(exc, f"got an error putting s3 object {key}") from exc

        self._logger.debug("s3_put_complete", bucket=bucket, key=key, size=len(data))

    async def delete(self, bucket: str, key: str) -> None:
        """Delete the object at *key*.  S3 treats a missing key as success."""
        try:
            await asyncio.to_thread(self._client.delete_object, Bucket=bucket, Key=key)
        except (ClientError, BotoCoreError) as exc:
            raise self._wrap(exc, f"got an error deleting s3 object {key}") from exc

    async def delete_folder(self, bucket: str, folder: str) -> None:
        """Delete all objects under *folder*, then the folder marker.

        Only the first listing page is processed (up to 1,000 keys).
        Individual delete failures are logged and skipped so one bad key
        does not leave the rest of the folder behind.
        """
        if not folder:
            return
        if not folder.endswith("/"):
            folder += "/"

        keys = await self.list(bucket, folder)

        # Deepest keys first, so nested "sub/" markers go after their children.
        failed = 0
        for key in reversed(keys):
            try:
                await self.delete(bucket, key)
            except StorageError as exc:
                failed += 1
                self._logger.warning("s3_folder_key_delete_failed", bucket=bucket, key=key, error=str(exc))

        marker = folder.rstrip("/")
        try:
            await self.delete(bucket, marker)
        except StorageError as exc:
            failed += 1
            self._logger.warning("s3_folder_key_delete_failed", bucket=bucket, key=marker, error=str(exc))

        self._logger.info(
            "s3_delete_folder_complete",
            bucket=bucket,
            folder=folder,
            deleted=len(keys) + 1 - failed,
            failed=failed,
        )

    async def list(
        self, bucket: str, prefix: str, params: ListObjectsParams | None = None
    ) -> list[str]:
        """Return object keys under *prefix*.

        When ``params.delimiter`` is set the result is the list of common
        prefixes (one level of "sub-folders") instead of object keys.
        """
        keys, _ = await self.list_tags(bucket, prefix, params)
        return keys

    async def list_tags(
        self, bucket: str, prefix: str, params: ListObjectsParams | None = None
    ) -> tuple[list[str], list[str]]:
        """Return object keys under *prefix* with their ETags.

        The two lists are index-aligned.  A missing ETag is reported as an
        empty string.  With a delimiter, returns ``(prefixes, [])``.
        """
        response = await self._list_objects(bucket, prefix, params)

        if params is not None and params.delimiter:
            prefixes = [p["Prefix"] for p in response.get("CommonPrefixes", [])]
            return prefixes, []

        contents = self._contents(response, prefix)
        keys = [obj["Key"] for obj in contents]
        tags = [obj.get("ETag") or "" for obj in contents]
        return keys, tags

    async def iter_keys(self, bucket: str, prefix: str) -> AsyncIterator[str]:
        """Yield object keys under *prefix*.

        The listing request is made before the first key is yielded, so a
        listing failure surfaces on the first ``__anext__``.
        """
        response = await self._list_objects(bucket, prefix, None)
        for obj in self._contents(response, prefix):
            yield obj["Key"]

    def get_provider_name(self) -> str:
        """Return the provider identifier."""
        return "s3"
