"""Custom exception hierarchy for awskit.

All library exceptions inherit from :class:`AwsKitError`, which carries an
optional ``provider_name`` so callers can identify which AWS service
(e.g. "s3", "lambda", "cognito") caused the failure.

The hierarchy is organized by service:

    AwsKitError  (base -- catch-all for any awskit error)
    +-- ConfigurationError       (session / credential / region setup)
    +-- StorageError             (S3 object operations)
    +-- FunctionInvocationError  (Lambda payload encoding or invoke)
    +-- DirectoryError           (Cognito user-pool operations)
        +-- UserNotFoundError    (no user matches the requested sub)

``UserNotFoundError`` is the only error the directory lookup cache
memoizes.  Callers distinguish it with ``isinstance`` (or ``except
UserNotFoundError``); the message text is never compared.
"""

from __future__ import annotations


class AwsKitError(Exception):
    """Base exception for all awskit errors.

    Every subclass carries a human-readable ``message`` and an optional
    ``provider_name`` identifying which AWS service triggered the error.
    ``__str__`` prefixes the provider name in brackets, e.g.
    ``[s3] got an error getting s3 object a.txt, error: ...``.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        provider_name: str | None = None,
    ) -> None:
        self._message = message
        self._provider_name = provider_name
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def provider_name(self) -> str | None:
        return self._provider_name

    def __str__(self) -> str:
        if self._provider_name:
            return f"[{self._provider_name}] {self._message}"
        return self._message


class ConfigurationError(AwsKitError):
    """Raised when the AWS session or client configuration cannot be loaded."""

    def __init__(
        self,
        message: str = "Invalid or missing configuration",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


# ---------------------------------------------------------------------------
# Service errors
# ---------------------------------------------------------------------------

_NOT_FOUND_CODES = frozenset({"NoSuchKey", "404", "NotFound"})


class StorageError(AwsKitError):
    """Raised when an S3 object operation fails.

    ``code`` holds the S3 error code (``"NoSuchKey"``, ``"AccessDenied"``,
    ...) when the failure came back from the service as a response error,
    and ``None`` for transport-level failures.
    """

    def __init__(
        self,
        message: str = "Object storage operation failed",
        provider_name: str | None = None,
        code: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
        self._code = code

    @property
    def code(self) -> str | None:
        return self._code

    @property
    def is_not_found(self) -> bool:
        """``True`` if the service reported that the object does not exist."""
        return self._code in _NOT_FOUND_CODES


class FunctionInvocationError(AwsKitError):
    """Raised when a Lambda request cannot be encoded or the invoke call fails."""

    def __init__(
        self,
        message: str = "Function invocation failed",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class DirectoryError(AwsKitError):
    """Raised when a Cognito user-pool operation fails."""

    def __init__(
        self,
        message: str = "Directory operation failed",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class UserNotFoundError(DirectoryError):
    """Raised when no user in the pool matches the requested ``sub``."""

    def __init__(
        self,
        user_pool_id: str,
        sub: str,
        provider_name: str | None = None,
    ) -> None:
        self._user_pool_id = user_pool_id
        self._sub = sub
        super().__init__(message="not found", provider_name=provider_name)

    @property
    def user_pool_id(self) -> str:
        return self._user_pool_id

    @property
    def sub(self) -> str:
        return self._sub
