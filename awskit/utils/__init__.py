"""Utility modules for awskit.

- **errors** -- Exception hierarchy rooted at AwsKitError; each AWS service
  raises its own subclass, and ``UserNotFoundError`` marks the one outcome
  the lookup cache memoizes.
- **concurrency** -- asyncio reader/writer lock guarding the lookup cache.
- **logging** -- structlog setup with console output in development and
  JSON in production.
"""

from awskit.utils.concurrency import ReadWriteLock
from awskit.utils.errors import (
    AwsKitError,
    ConfigurationError,
    DirectoryError,
    FunctionInvocationError,
    StorageError,
    UserNotFoundError,
)
from awskit.utils.logging import configure_logging, get_logger

__all__ = [
    "AwsKitError",
    "ConfigurationError",
    "DirectoryError",
    "FunctionInvocationError",
    "ReadWriteLock",
    "StorageError",
    "UserNotFoundError",
    "configure_logging",
    "get_logger",
]
