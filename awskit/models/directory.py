"""Identity-directory models: users, listing pages, and cached lookup outcomes.

``UserRecord`` is the library's view of a Cognito ``UserType``.  Attributes
arrive from the service as a list of ``{"Name": ..., "Value": ...}`` pairs and
are flattened into a plain mapping when the record is built, so callers read
``record.attributes["email"]`` instead of scanning a list.

``CacheEntry`` is what the lookup cache stores per (user pool, sub) key.  It
is a frozen dataclass rather than a pydantic model because the negative
outcome holds an exception instance.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from awskit.utils.errors import UserNotFoundError


class UserRecord(BaseModel):
    """A user profile in a Cognito user pool."""

    model_config = ConfigDict(frozen=True)

    username: str
    attributes: dict[str, str] = Field(default_factory=dict)
    enabled: bool = True
    status: str | None = None                     # e.g. CONFIRMED, FORCE_CHANGE_PASSWORD
    created_at: datetime.datetime | None = None
    last_modified_at: datetime.datetime | None = None

    @property
    def sub(self) -> str | None:
        """The stable user identifier, if the pool returned it."""
        return self.attributes.get("sub")

    @property
    def email(self) -> str | None:
        return self.attributes.get("email")

    @classmethod
    def from_cognito(cls, user: dict[str, Any]) -> UserRecord:
        """Build a record from a boto3 ``UserType`` dict."""
        attributes = {
            attr.get("Name", ""): attr.get("Value", "")
            for attr in user.get("Attributes", [])
        }
        return cls(
            username=user.get("Username", ""),
            attributes=attributes,
            enabled=user.get("Enabled", True),
            status=user.get("UserStatus"),
            created_at=user.get("UserCreateDate"),
            last_modified_at=user.get("UserLastModifiedDate"),
        )


class UserPage(BaseModel):
    """One page of a user-pool listing."""

    model_config = ConfigDict(frozen=True)

    users: list[UserRecord] = Field(default_factory=list)
    # None once the listing is exhausted.
    pagination_token: str | None = None


class LookupOutcome(str, Enum):  # noqa: UP042
    FOUND = "FOUND"
    NOT_FOUND = "NOT_FOUND"


@dataclass(frozen=True)
class CacheEntry:
    """One memoized result of a directory lookup.

    Exactly one of ``record`` / ``error`` is set, matching ``outcome``.
    Build entries with :meth:`found` and :meth:`not_found`.
    """

    outcome: LookupOutcome
    record: UserRecord | None = None
    error: UserNotFoundError | None = None

    def __post_init__(self) -> None:
        if self.outcome is LookupOutcome.FOUND:
            if self.record is None or self.error is not None:
                raise ValueError("FOUND entry requires a record and no error")
        elif self.record is not None or self.error is None:
            raise ValueError("NOT_FOUND entry requires an error and no record")

    @classmethod
    def found(cls, record: UserRecord) -> CacheEntry:
        return cls(outcome=LookupOutcome.FOUND, record=record)

    @classmethod
    def not_found(cls, error: UserNotFoundError) -> CacheEntry:
        return cls(outcome=LookupOutcome.NOT_FOUND, error=error)

    @property
    def is_found(self) -> bool:
        return self.outcome is LookupOutcome.FOUND
