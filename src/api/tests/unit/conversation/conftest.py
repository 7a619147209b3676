"""In-memory fakes of the conversation ports.

The fakes behave like the PostgreSQL adapters (autoincrement ids,
conditional title writes, tenant filtering) so scenario tests can drive
the real services end to end without a database.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import UTC, datetime
from typing import Sequence

import pytest

from conversation.application.access_gate import SessionAccessGate
from conversation.application.services import ReplayEngine, SessionService
from conversation.application.session_locks import SessionLockRegistry
from conversation.domain.aggregates import ChatSession, Message, SessionSummary
from conversation.domain.transcript import TranscriptEntry
from conversation.domain.value_objects import Sender
from conversation.ports.exceptions import OracleError
from shared_kernel.exceptions import PersistenceError


class InMemoryConversationStore:
    """Shared state behind the fake repositories."""

    def __init__(self) -> None:
        self.sessions: dict[int, ChatSession] = {}
        self.messages: list[Message] = []
        self._next_session_id = 1
        self._next_message_id = 1
        self.fail_appends_from_sender: Sender | None = None

    def messages_for(self, session_id: int) -> list[Message]:
        return [m for m in self.messages if m.session_id == session_id]


class FakeChatSessionRepository:
    """In-memory IChatSessionRepository.

    Returns copies so callers cannot mutate stored state by accident.
    """

    def __init__(self, store: InMemoryConversationStore) -> None:
        self._store = store

    async def create(self, tenant_id: str) -> ChatSession:
        session_id = self._store._next_session_id
        self._store._next_session_id += 1
        chat_session = ChatSession(
            id=session_id,
            tenant_id=tenant_id,
            created_at=datetime.now(UTC),
        )
        self._store.sessions[session_id] = chat_session
        return replace(chat_session)

    async def get_for_tenant(self, session_id: int, tenant_id: str) -> ChatSession | None:
        chat_session = self._store.sessions.get(session_id)
        if chat_session is None or chat_session.tenant_id != tenant_id:
            return None
        return replace(chat_session)

    async def assign_title_if_absent(self, session_id: int, title: str) -> str | None:
        chat_session = self._store.sessions.get(session_id)
        if chat_session is None:
            return None
        if chat_session.title is None:
            chat_session.title = title
        return chat_session.title

    async def list_latest(self, tenant_id: str) -> list[SessionSummary]:
        owned = [s for s in self._store.sessions.values() if s.tenant_id == tenant_id]
        owned.sort(key=lambda s: (s.created_at, s.id), reverse=True)
        summaries = []
        for chat_session in owned:
            history = self._store.messages_for(chat_session.id)
            summaries.append(
                SessionSummary(
                    session=replace(chat_session),
                    last_message=history[-1] if history else None,
                )
            )
        return summaries


class FakeMessageRepository:
    """In-memory IMessageRepository with an optional injected failure."""

    def __init__(self, store: InMemoryConversationStore) -> None:
        self._store = store

    async def append(self, session_id: int, sender: Sender, content: str) -> Message:
        if self._store.fail_appends_from_sender == sender:
            raise PersistenceError(f"cannot append {sender} message")

        message = Message(
            id=self._store._next_message_id,
            session_id=session_id,
            sender=sender,
            content=content,
            created_at=datetime.now(UTC),
        )
        self._store._next_message_id += 1
        self._store.messages.append(message)
        return message

    async def history(self, session_id: int) -> list[Message]:
        return self._store.messages_for(session_id)


class FakeOracle:
    """Scripted IConversationOracle that records every call."""

    def __init__(self) -> None:
        self.replies: list[str | None] = []
        self.default_reply: str | None = "ok"
        self.reply_error: Exception | None = None
        self.title: str = "Generated Title"
        self.title_error: Exception | None = None
        self.reply_calls: list[tuple[tuple[TranscriptEntry, ...], str]] = []
        self.title_calls: list[str] = []

    async def generate_reply(
        self, prior_context: Sequence[TranscriptEntry], current_turn: str
    ) -> str | None:
        self.reply_calls.append((tuple(prior_context), current_turn))
        if self.reply_error is not None:
            raise self.reply_error
        if self.replies:
            return self.replies.pop(0)
        return self.default_reply

    async def generate_title(self, seed_text: str) -> str:
        self.title_calls.append(seed_text)
        if self.title_error is not None:
            raise self.title_error
        return self.title


@pytest.fixture
def store() -> InMemoryConversationStore:
    return InMemoryConversationStore()


@pytest.fixture
def session_repository(store) -> FakeChatSessionRepository:
    return FakeChatSessionRepository(store)


@pytest.fixture
def message_repository(store) -> FakeMessageRepository:
    return FakeMessageRepository(store)


@pytest.fixture
def oracle() -> FakeOracle:
    return FakeOracle()


@pytest.fixture
def locks() -> SessionLockRegistry:
    return SessionLockRegistry()


@pytest.fixture
def session_service(mock_session, session_repository, message_repository, oracle):
    return SessionService(
        session=mock_session,
        session_repository=session_repository,
        message_repository=message_repository,
        oracle=oracle,
    )


@pytest.fixture
def access_gate(mock_session, session_repository):
    return SessionAccessGate(session=mock_session, session_repository=session_repository)


@pytest.fixture
def replay_engine(mock_session, message_repository, session_service, oracle, locks):
    return ReplayEngine(
        session=mock_session,
        message_repository=message_repository,
        session_service=session_service,
        oracle=oracle,
        locks=locks,
    )


@pytest.fixture
def oracle_error() -> OracleError:
    return OracleError("upstream unavailable")
