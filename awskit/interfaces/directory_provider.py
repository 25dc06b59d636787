"""Abstract base class for identity-directory providers.

This is the contract the directory lookup cache consumes.  The cache only
ever calls :meth:`IDirectoryProvider.get_user` and relies on one thing
beyond the return value: a missing user is reported by raising
:class:`~awskit.utils.errors.UserNotFoundError`, and every other failure by
raising anything else.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from awskit.models.directory import UserPage, UserRecord


# Concrete implementation: CognitoDirectoryProvider (awskit/providers/directory/)
class IDirectoryProvider(ABC):
    """Contract for user-pool directories."""

    @abstractmethod
    async def get_user(self, user_pool_id: str, sub: str) -> UserRecord:
        """Return the user whose ``sub`` attribute equals *sub*.

        Parameters
        ----------
        user_pool_id:
            The user pool (directory instance) to search.
        sub:
            The user's stable identifier.

        Raises
        ------
        awskit.utils.errors.UserNotFoundError
            If no user matches.
        awskit.utils.errors.DirectoryError
            For transport, permission, or throttling failures.
        """

    @abstractmethod
    async def count_users(self, user_pool_id: str) -> int:
        """Return the service's estimate of the number of users in the pool."""

    @abstractmethod
    async def list_users(
        self,
        user_pool_id: str,
        limit: int = 60,
        filter: str = "",
        pagination_token: str | None = None,
    ) -> UserPage:
        """Return one page of users.

        Parameters
        ----------
        limit:
            Maximum number of users on the page.
        filter:
            A Cognito filter expression, e.g. ``'family_name = "Reddy"'``
            or ``'email ^= "jon"'``.  Empty returns all users.
        pagination_token:
            Token from the previous page, or ``None`` for the first page.
        """

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a short identifier for this provider (e.g. ``"cognito"``)."""
