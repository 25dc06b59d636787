"""awskit domain models: re-exports all public model classes.

    - directory.py: Cognito users, listing pages, lookup-cache entries
    - functions.py: Lambda invocation results
    - storage.py: S3 object metadata and listing parameters
"""

from __future__ import annotations

from awskit.models.directory import CacheEntry, LookupOutcome, UserPage, UserRecord
from awskit.models.functions import InvocationResult
from awskit.models.storage import ListObjectsParams, ObjectInfo

__all__ = [
    "CacheEntry",
    "InvocationResult",
    "ListObjectsParams",
    "LookupOutcome",
    "ObjectInfo",
    "UserPage",
    "UserRecord",
]
