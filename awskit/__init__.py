"""awskit - async helpers for S3, Lambda and Cognito on top of boto3.

Layers:
    - interfaces: provider contracts (IObjectStorageProvider, ...)
    - providers: boto3 adapters implementing the contracts
    - services: DirectoryLookupCache, the memoizing front for lookups by sub
    - models: pydantic models passed across the public API
    - utils: errors, logging, concurrency primitives

Usage:
    ```python
    from awskit import build_clients

    clients = build_clients(region="eu-west-1")
    user = await clients.directory_cache.get(pool_id, sub)
    ```
"""

from awskit.config.settings import Settings
from awskit.main import AwsClients, build_clients
from awskit.models import (
    CacheEntry,
    InvocationResult,
    ListObjectsParams,
    LookupOutcome,
    ObjectInfo,
    UserPage,
    UserRecord,
)
from awskit.services.lookup_cache import DirectoryLookupCache
from awskit.utils.errors import (
    AwsKitError,
    ConfigurationError,
    DirectoryError,
    FunctionInvocationError,
    StorageError,
    UserNotFoundError,
)

__all__ = [
    # Factory
    "AwsClients",
    "Settings",
    "build_clients",
    # Cache
    "DirectoryLookupCache",
    # Models
    "CacheEntry",
    "InvocationResult",
    "ListObjectsParams",
    "LookupOutcome",
    "ObjectInfo",
    "UserPage",
    "UserRecord",
    # Errors
    "AwsKitError",
    "ConfigurationError",
    "DirectoryError",
    "FunctionInvocationError",
    "StorageError",
    "UserNotFoundError",
]
