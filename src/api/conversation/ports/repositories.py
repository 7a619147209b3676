"""Repository protocols (ports) for the conversation bounded context.

Every session read is scoped by tenant. Message reads are scoped by
session only; callers must authorize the session first.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from conversation.domain.aggregates import ChatSession, Message, SessionSummary
from conversation.domain.value_objects import Sender


@runtime_checkable
class IChatSessionRepository(Protocol):
    """Repository for ChatSession aggregate persistence."""

    async def create(self, tenant_id: str) -> ChatSession:
        """Create an untitled session owned by a tenant.

        Args:
            tenant_id: The owning tenant

        Returns:
            The persisted ChatSession with its store-assigned id

        Raises:
            PersistenceError: If the store operation fails
        """
        ...

    async def get_for_tenant(
        self, session_id: int, tenant_id: str
    ) -> ChatSession | None:
        """Retrieve a session only if the given tenant owns it.

        Args:
            session_id: The session identifier
            tenant_id: The requesting tenant

        Returns:
            The ChatSession, or None if absent or owned by another tenant
        """
        ...

    async def assign_title_if_absent(self, session_id: int, title: str) -> str | None:
        """Set the title only if the session has none yet.

        Implementations must apply this as a single conditional write so a
        title, once stored, is never overwritten.

        Args:
            session_id: The session identifier
            title: The candidate title

        Returns:
            The title stored after the write (the candidate, or the title
            already present), or None if the session does not exist
        """
        ...

    async def list_latest(self, tenant_id: str) -> list[SessionSummary]:
        """List a tenant's sessions, newest first, with their latest message.

        Args:
            tenant_id: The owning tenant

        Returns:
            SessionSummary items ordered by creation time descending
        """
        ...


@runtime_checkable
class IMessageRepository(Protocol):
    """Append-only store of conversation turns."""

    async def append(self, session_id: int, sender: Sender, content: str) -> Message:
        """Append an immutable turn to a session.

        Args:
            session_id: The session the turn belongs to
            sender: Who authored the turn
            content: The turn text

        Returns:
            The persisted Message, ordered after every existing turn

        Raises:
            PersistenceError: If the store operation fails
        """
        ...

    async def history(self, session_id: int) -> list[Message]:
        """Return every turn of a session in ascending order.

        Args:
            session_id: The session identifier

        Returns:
            All messages, oldest first
        """
        ...
