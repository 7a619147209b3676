"""Per-session turn serialization.

Two turns on the same session must not interleave: the second turn's
history read has to see the first turn's bot reply. Locks are kept in a
WeakValueDictionary so a session's lock disappears once no coroutine is
holding or waiting on it.

Locks are local to one event loop in one worker process.
"""

from __future__ import annotations

import asyncio
import weakref
from contextlib import asynccontextmanager
from typing import AsyncIterator


class SessionLockRegistry:
    """Hands out one asyncio.Lock per chat session id."""

    def __init__(self) -> None:
        self._locks: weakref.WeakValueDictionary[int, asyncio.Lock] = (
            weakref.WeakValueDictionary()
        )

    def lock_for(self, session_id: int) -> asyncio.Lock:
        """Return the lock guarding a session, creating it if needed."""
        lock = self._locks.get(session_id)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[session_id] = lock
        return lock

    @asynccontextmanager
    async def hold(self, session_id: int) -> AsyncIterator[None]:
        """Hold the session's lock for the duration of the block."""
        lock = self.lock_for(session_id)
        async with lock:
            yield

    def __len__(self) -> int:
        return len(self._locks)
