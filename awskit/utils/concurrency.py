"""Shared concurrency primitives.

asyncio ships ``Lock`` and ``Semaphore`` but no reader/writer lock, which is
what the directory lookup cache needs: cache hits are pure reads and should
not queue behind each other, while a miss has to populate the store without
any reader observing a half-written state.

:class:`ReadWriteLock` gives:

- any number of concurrent holders of :meth:`ReadWriteLock.read`;
- at most one holder of :meth:`ReadWriteLock.write`, with no readers;
- writer preference: once a writer is waiting, new readers queue behind it,
  so a steady stream of cache hits cannot starve a miss or a ``clear``.
"""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator


class ReadWriteLock:
    """Reader/writer lock for asyncio tasks.

    Not reentrant: a task holding the read side must not request the write
    side (it would wait for itself).
    """

    def __init__(self) -> None:
        self._cond = asyncio.Condition()
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    @property
    def readers(self) -> int:
        """Number of tasks currently holding the read side."""
        return self._readers

    @property
    def writer_active(self) -> bool:
        return self._writer

    @asynccontextmanager
    async def read(self) -> AsyncIterator[None]:
        """Hold the shared side for the duration of the ``async with`` block."""
        async with self._cond:
            await self._cond.wait_for(
                lambda: not self._writer and self._waiting_writers == 0
            )
            self._readers += 1
        try:
            yield
        finally:
            async with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @asynccontextmanager
    async def write(self) -> AsyncIterator[None]:
        """Hold the exclusive side for the duration of the ``async with`` block."""
        async with self._cond:
            self._waiting_writers += 1
            try:
                await self._cond.wait_for(
                    lambda: not self._writer and self._readers == 0
                )
            except BaseException:
                # Readers may be parked behind this writer.
                self._waiting_writers -= 1
                self._cond.notify_all()
                raise
            self._waiting_writers -= 1
            self._writer = True
        try:
            yield
        finally:
            async with self._cond:
                self._writer = False
                self._cond.notify_all()
