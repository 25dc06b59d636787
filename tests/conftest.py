"""Shared pytest fixtures for the awskit test suite."""

from __future__ import annotations

import asyncio
import datetime
from typing import Any
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from awskit.interfaces.directory_provider import IDirectoryProvider
from awskit.models.directory import UserPage, UserRecord
from awskit.utils.errors import UserNotFoundError


def client_error(code: str, operation: str = "Operation", message: str = "boom") -> ClientError:
    """Build a botocore ClientError the way the service would return it."""
    return ClientError({"Error": {"Code": code, "Message": message}}, operation)


def make_user(sub: str, username: str | None = None, **attributes: str) -> UserRecord:
    return UserRecord(
        username=username or f"user-{sub}",
        attributes={"sub": sub, **attributes},
        enabled=True,
        status="CONFIRMED",
    )


def cognito_user(sub: str, username: str = "jdoe", email: str = "jdoe@example.com") -> dict[str, Any]:
    """A ``UserType`` dict as returned by boto3 ``list_users``."""
    return {
        "Username": username,
        "Attributes": [
            {"Name": "sub", "Value": sub},
            {"Name": "email", "Value": email},
            {"Name": "email_verified", "Value": "true"},
        ],
        "UserCreateDate": datetime.datetime(2023, 5, 1, 12, 0, tzinfo=datetime.timezone.utc),
        "UserLastModifiedDate": datetime.datetime(2023, 6, 1, 8, 30, tzinfo=datetime.timezone.utc),
        "Enabled": True,
        "UserStatus": "CONFIRMED",
    }


class FakeDirectoryProvider(IDirectoryProvider):
    """In-memory directory that counts calls.

    ``failures`` are raised, in order, before normal lookups resume.
    ``delay`` makes each lookup yield to the event loop so concurrent
    callers actually overlap.
    """

    def __init__(
        self,
        users: dict[tuple[str, str], UserRecord] | None = None,
        delay: float = 0.0,
    ) -> None:
        self.users = users or {}
        self.delay = delay
        self.failures: list[Exception] = []
        self.calls: list[tuple[str, str]] = []
        self.in_flight = 0
        self.peak_in_flight = 0

    @property
    def call_count(self) -> int:
        return len(self.calls)

    async def get_user(self, user_pool_id: str, sub: str) -> UserRecord:
        self.calls.append((user_pool_id, sub))
        self.in_flight += 1
        self.peak_in_flight = max(self.peak_in_flight, self.in_flight)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
            if self.failures:
                raise self.failures.pop(0)
            record = self.users.get((user_pool_id, sub))
            if record is None:
                raise UserNotFoundError(user_pool_id, sub, provider_name="fake")
            return record
        finally:
            self.in_flight -= 1

    async def count_users(self, user_pool_id: str) -> int:
        return sum(1 for pool, _ in self.users if pool == user_pool_id)

    async def list_users(
        self,
        user_pool_id: str,
        limit: int = 60,
        filter: str = "",
        pagination_token: str | None = None,
    ) -> UserPage:
        users = [u for (pool, _), u in self.users.items() if pool == user_pool_id]
        return UserPage(users=users[:limit])

    def get_provider_name(self) -> str:
        return "fake"


@pytest.fixture
def real_user() -> UserRecord:
    return make_user("real-sub", email="real@example.com")


@pytest.fixture
def fake_directory(real_user: UserRecord) -> FakeDirectoryProvider:
    """Directory where ``real-sub`` exists in pool-1 and pool-2 and nothing else."""
    return FakeDirectoryProvider(
        users={
            ("pool-1", "real-sub"): real_user,
            ("pool-2", "real-sub"): real_user,
        }
    )


@pytest.fixture
def mock_s3_client() -> MagicMock:
    return MagicMock(name="s3_client")


@pytest.fixture
def mock_lambda_client() -> MagicMock:
    return MagicMock(name="lambda_client")


@pytest.fixture
def mock_cognito_client() -> MagicMock:
    return MagicMock(name="cognito_client")
