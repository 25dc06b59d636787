"""Read-through cache for directory lookups by user sub.

Looking a user up by ``sub`` costs a ``ListUsers`` round-trip, and the same
handful of subs tend to be looked up over and over (one per authenticated
request).  :class:`DirectoryLookupCache` sits in front of an
:class:`~awskit.interfaces.directory_provider.IDirectoryProvider` and
memoizes, per user pool:

- successful lookups, and
- "not found" results (``UserNotFoundError``), so unknown subs do not hit
  Cognito on every request either.

Any other provider failure (throttling, network, permissions) is passed
through and **not** cached; the next call tries the provider again.

Entries never expire.  The only way to drop them is :meth:`clear`, which
removes every entry of one user pool.

Locking
-------
One :class:`~awskit.utils.concurrency.ReadWriteLock` guards the whole store.
Hits take the read side and run concurrently.  A miss takes the write side
and holds it across the provider call, which serializes every miss in the
cache (even for unrelated pools) but means concurrent misses for the same
key reach the provider exactly once: whoever gets the write side second
finds the entry already there.
"""

from __future__ import annotations

from awskit.interfaces.directory_provider import IDirectoryProvider
from awskit.models.directory import CacheEntry, UserRecord
from awskit.utils.concurrency import ReadWriteLock
from awskit.utils.errors import UserNotFoundError
from awskit.utils.logging import get_logger


class DirectoryLookupCache:
    """Memoizing front for :meth:`IDirectoryProvider.get_user`.

    Parameters
    ----------
    provider:
        The directory to fall back to on a miss.
    """

    def __init__(self, provider: IDirectoryProvider) -> None:
        self._provider = provider
        # user pool id -> sub -> entry
        self._store: dict[str, dict[str, CacheEntry]] = {}
        self._lock = ReadWriteLock()
        self._logger = get_logger(__name__)

    @property
    def provider(self) -> IDirectoryProvider:
        return self._provider

    def _lookup(self, user_pool_id: str, sub: str) -> CacheEntry | None:
        return self._store.get(user_pool_id, {}).get(sub)

    @staticmethod
    def _detached(error: UserNotFoundError) -> UserNotFoundError:
        """A copy of *error* that has never been raised."""
        return UserNotFoundError(error.user_pool_id, error.sub, provider_name=error.provider_name)

    def _serve(self, entry: CacheEntry) -> UserRecord:
        if entry.is_found:
            return entry.record  # type: ignore[return-value]
        # Raising attaches traceback and context to the instance, so the
        # stored error is never raised itself.
        raise self._detached(entry.error)  # type: ignore[arg-type]

    async def get(self, user_pool_id: str, sub: str) -> UserRecord:
        """Return the user with *sub* in *user_pool_id*.

        Raises
        ------
        UserNotFoundError
            If the provider reported no such user, now or on an earlier
            call since the last :meth:`clear` of the pool.
        Exception
            Whatever else the provider raised, unchanged.
        """
        async with self._lock.read():
            entry = self._lookup(user_pool_id, sub)
        if entry is not None:
            self._logger.debug("lookup_cache_hit", user_pool_id=user_pool_id, sub=sub)
            return self._serve(entry)

        async with self._lock.write():
            # Another task may have filled the key while we waited.
            entry = self._lookup(user_pool_id, sub)
            if entry is not None:
                self._logger.debug("lookup_cache_hit", user_pool_id=user_pool_id, sub=sub)
                return self._serve(entry)

            self._logger.debug("lookup_cache_miss", user_pool_id=user_pool_id, sub=sub)
            try:
                record = await self._provider.get_user(user_pool_id, sub)
            except UserNotFoundError as exc:
                self._store.setdefault(user_pool_id, {})[sub] = CacheEntry.not_found(
                    self._detached(exc)
                )
                raise
            except Exception as exc:
                self._logger.warning(
                    "lookup_cache_provider_error",
                    user_pool_id=user_pool_id,
                    sub=sub,
                    error=str(exc),
                )
                raise

            self._store.setdefault(user_pool_id, {})[sub] = CacheEntry.found(record)
            return record

    async def len(self, user_pool_id: str) -> int:
        """Number of cached entries, found and not-found, for *user_pool_id*."""
        async with self._lock.read():
            return len(self._store.get(user_pool_id, {}))

    async def clear(self, user_pool_id: str) -> None:
        """Drop every cached entry of *user_pool_id*; other pools are untouched."""
        async with self._lock.write():
            removed = self._store.pop(user_pool_id, None)
        self._logger.debug(
            "lookup_cache_cleared",
            user_pool_id=user_pool_id,
            removed=len(removed) if removed else 0,
        )
