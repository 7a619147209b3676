"""Session lifecycle application service.

Creates chat sessions, assigns their title on the first user turn and
lists a tenant's sessions for the session picker.
"""

from __future__ import annotations

import re

from sqlalchemy.ext.asyncio import AsyncSession

from conversation.application.observability import (
    DefaultSessionServiceProbe,
    SessionServiceProbe,
)
from conversation.domain.aggregates import ChatSession, Message, SessionSummary
from conversation.ports.oracle import IConversationOracle
from conversation.ports.repositories import IChatSessionRepository, IMessageRepository

DEFAULT_TITLE = "New Chat"
MAX_TITLE_LENGTH = 255

_WHITESPACE = re.compile(r"\s+")
_QUOTES = "\"'`"


def normalize_title(raw: str | None) -> str | None:
    """Clean up a generated title.

    Collapses whitespace, strips surrounding quotes and truncates to the
    column width.

    Returns:
        The cleaned title, or None if nothing usable remains
    """
    if raw is None:
        return None

    title = _WHITESPACE.sub(" ", raw).strip().strip(_QUOTES).strip()
    if not title:
        return None

    return title[:MAX_TITLE_LENGTH].rstrip()


class SessionService:
    """Application service for chat session lifecycle.

    Titling calls the conversational model outside of any database
    transaction; only the conditional title write runs in one.
    """

    def __init__(
        self,
        session: AsyncSession,
        session_repository: IChatSessionRepository,
        message_repository: IMessageRepository,
        oracle: IConversationOracle,
        probe: SessionServiceProbe | None = None,
    ):
        """Initialize SessionService with dependencies.

        Args:
            session: Database session for transaction management
            session_repository: Repository for chat sessions
            message_repository: Repository for conversation turns
            oracle: Conversational model used for titles
            probe: Optional domain probe for observability
        """
        self._session = session
        self._session_repository = session_repository
        self._message_repository = message_repository
        self._oracle = oracle
        self._probe = probe or DefaultSessionServiceProbe()

    async def start_session(self, tenant_id: str) -> ChatSession:
        """Create an untitled session owned by the tenant.

        Raises:
            PersistenceError: If the store write fails
        """
        async with self._session.begin():
            chat_session = await self._session_repository.create(tenant_id)

        self._probe.session_started(session_id=chat_session.id, tenant_id=tenant_id)
        return chat_session

    async def ensure_titled(self, chat_session: ChatSession, first_user_message: str) -> None:
        """Give an untitled session its title, exactly once.

        The title comes from the conversational model. Any failure there,
        or an empty result, falls back to DEFAULT_TITLE. The write only
        lands if the session is still untitled, and the aggregate is
        updated with whatever title the store holds afterwards.

        Args:
            chat_session: The session to title; updated in place
            first_user_message: Text used to seed the title

        Raises:
            PersistenceError: If the title write fails
        """
        if chat_session.is_titled:
            return

        try:
            generated = await self._oracle.generate_title(first_user_message)
        except Exception as e:
            self._probe.title_generation_failed(session_id=chat_session.id, error=str(e))
            generated = None

        candidate = normalize_title(generated) or DEFAULT_TITLE

        async with self._session.begin():
            stored = await self._session_repository.assign_title_if_absent(
                chat_session.id, candidate
            )

        stored = stored or candidate
        if stored != candidate:
            self._probe.title_already_present(session_id=chat_session.id)
        else:
            self._probe.session_titled(session_id=chat_session.id, title=stored)

        chat_session.assign_title(stored)

    async def list_sessions(self, tenant_id: str) -> list[SessionSummary]:
        """List the tenant's sessions, newest first, with their latest turn."""
        async with self._session.begin():
            summaries = await self._session_repository.list_latest(tenant_id)

        self._probe.sessions_listed(tenant_id=tenant_id, count=len(summaries))
        return summaries

    async def history(self, chat_session: ChatSession) -> list[Message]:
        """Return every turn of an authorized session, oldest first."""
        async with self._session.begin():
            return await self._message_repository.history(chat_session.id)
