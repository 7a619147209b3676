"""Unit tests for SessionLockRegistry."""

import asyncio
import gc

import pytest

from conversation.application.session_locks import SessionLockRegistry


class TestLockFor:
    """Tests for SessionLockRegistry.lock_for."""

    def test_same_session_shares_a_lock(self):
        registry = SessionLockRegistry()

        assert registry.lock_for(1) is registry.lock_for(1)

    def test_different_sessions_get_different_locks(self):
        registry = SessionLockRegistry()

        assert registry.lock_for(1) is not registry.lock_for(2)

    def test_unused_locks_are_released(self):
        registry = SessionLockRegistry()
        registry.lock_for(1)
        gc.collect()

        assert len(registry) == 0


class TestHold:
    """Tests for SessionLockRegistry.hold."""

    @pytest.mark.asyncio
    async def test_serializes_same_session(self):
        registry = SessionLockRegistry()
        events: list[str] = []

        async def turn(name: str):
            async with registry.hold(1):
                events.append(f"{name}-start")
                await asyncio.sleep(0.01)
                events.append(f"{name}-end")

        await asyncio.gather(turn("a"), turn("b"))

        assert events == ["a-start", "a-end", "b-start", "b-end"]

    @pytest.mark.asyncio
    async def test_different_sessions_run_concurrently(self):
        registry = SessionLockRegistry()
        events: list[str] = []

        async def turn(session_id: int):
            async with registry.hold(session_id):
                events.append(f"{session_id}-start")
                await asyncio.sleep(0.01)
                events.append(f"{session_id}-end")

        await asyncio.gather(turn(1), turn(2))

        assert events[:2] == ["1-start", "2-start"]

    @pytest.mark.asyncio
    async def test_lock_is_released_after_error(self):
        registry = SessionLockRegistry()
        lock = registry.lock_for(1)

        with pytest.raises(RuntimeError):
            async with registry.hold(1):
                raise RuntimeError("boom")

        assert not lock.locked()
