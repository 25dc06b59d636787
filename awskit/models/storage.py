"""Object-storage models for the S3 adapter."""

from __future__ import annotations

import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ListObjectsParams(BaseModel):
    """Optional parameters for ``S3StorageProvider.list`` and ``list_tags``.

    ``max_keys`` of 0 leaves the limit to the service (up to 1,000 keys).
    ``marker`` is the key to start listing after.  A non-empty ``delimiter``
    groups keys, and the listing then returns the common prefixes instead of
    object keys.
    """

    model_config = ConfigDict(frozen=True)

    max_keys: int = Field(default=0, ge=0)
    marker: str = ""
    delimiter: str = ""

    def to_request(self) -> dict[str, Any]:
        """Render only the parameters that were actually set."""
        request: dict[str, Any] = {}
        if self.max_keys > 0:
            request["MaxKeys"] = self.max_keys
        if self.marker:
            request["Marker"] = self.marker
        if self.delimiter:
            request["Delimiter"] = self.delimiter
        return request


class ObjectInfo(BaseModel):
    """Metadata of an S3 object, as returned by ``HeadObject``."""

    model_config = ConfigDict(frozen=True)

    key: str
    size: int = 0
    etag: str = ""
    last_modified: datetime.datetime | None = None
    content_type: str | None = None
    metadata: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_head(cls, key: str, response: dict[str, Any]) -> ObjectInfo:
        return cls(
            key=key,
            size=response.get("ContentLength", 0),
            etag=response.get("ETag", ""),
            last_modified=response.get("LastModified"),
            content_type=response.get("ContentType"),
            metadata=response.get("Metadata", {}),
        )
