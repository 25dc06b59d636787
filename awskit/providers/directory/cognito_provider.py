"""Amazon Cognito user-pool directory provider using boto3.

Implements IDirectoryProvider over the ``cognito-idp`` client.  Lookups by
``sub`` go through ``ListUsers`` with a filter expression, since Cognito has
no direct get-by-sub call; an empty result page is the "not found" signal.
"""

from __future__ import annotations

import asyncio
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from awskit.interfaces.directory_provider import IDirectoryProvider
from awskit.models.directory import UserPage, UserRecord
from awskit.utils.errors import DirectoryError, UserNotFoundError
from awskit.utils.logging import get_logger


def sub_filter(sub: str) -> str:
    """Build an exact-match ``ListUsers`` filter for *sub*.

    Quotation marks inside filter values must be backslash-escaped.
    """
    escaped = sub.replace("\\", "\\\\").replace('"', '\\"')
    return f'sub = "{escaped}"'


class CognitoDirectoryProvider(IDirectoryProvider):
    """User-pool directory backed by Amazon Cognito."""

    def __init__(self, client: Any) -> None:
        self._client = client
        self._logger = get_logger(__name__)

    def _wrap(self, exc: Exception, message: str) -> DirectoryError:
        return DirectoryError(
            message=f"{message}: {exc}",
            provider_name=self.get_provider_name(),
        )

    async def get_user(self, user_pool_id: str, sub: str) -> UserRecord:
        """Return the user whose ``sub`` equals *sub*."""
        try:
            response = await asyncio.to_thread(
                self._client.list_users,
                UserPoolId=user_pool_id,
                Filter=sub_filter(sub),
                Limit=1,
            )
        except (ClientError, BotoCoreError) as exc:
            raise self._wrap(exc, f"error getting cognito user by sub {sub}") from exc

        users = response.get("Users", [])
        if not users:
            raise UserNotFoundError(user_pool_id, sub, provider_name=self.get_provider_name())

        return UserRecord.from_cognito(users[0])

    async def count_users(self, user_pool_id: str) -> int:
        """Return ``EstimatedNumberOfUsers`` of the pool."""
        try:
            response = await asyncio.to_thread(
                self._client.describe_user_pool, UserPoolId=user_pool_id
            )
        except (ClientError, BotoCoreError) as exc:
            raise self._wrap(exc, f"error describing user pool {user_pool_id}") from exc

        return int(response.get("UserPool", {}).get("EstimatedNumberOfUsers", 0))

    async def list_users(
        self,
        user_pool_id: str,
        limit: int = 60,
        filter: str = "",
        pagination_token: str | None = None,
    ) -> UserPage:
        """Return one page of users matching *filter*.

        Searchable standard attributes are ``username``, ``email``,
        ``phone_number``, ``name``, ``given_name``, ``family_name``,
        ``preferred_username``, ``cognito:user_status``, ``status`` and
        ``sub``; ``=`` is an exact match and ``^=`` a prefix match.
        """
        request: dict[str, Any] = {"UserPoolId": user_pool_id, "Limit": limit}
        if filter:
            request["Filter"] = filter
        if pagination_token:
            request["PaginationToken"] = pagination_token

        try:
            response = await asyncio.to_thread(self._client.list_users, **request)
        except (ClientError, BotoCoreError) as exc:
            raise self._wrap(exc, f"error listing users of pool {user_pool_id}") from exc

        users = [UserRecord.from_cognito(u) for u in response.get("Users", [])]
        self._logger.debug(
            "cognito_list_users_complete",
            user_pool_id=user_pool_id,
            user_count=len(users),
            has_more=bool(response.get("PaginationToken")),
        )
        return UserPage(users=users, pagination_token=response.get("PaginationToken"))

    def get_provider_name(self) -> str:
        """Return the provider identifier."""
        return "cognito"
