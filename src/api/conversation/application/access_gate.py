"""Tenant-scoped authorization for chat sessions."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from conversation.application.observability import (
    DefaultSessionServiceProbe,
    SessionServiceProbe,
)
from conversation.domain.aggregates import ChatSession
from conversation.ports.exceptions import SessionNotFoundError
from conversation.ports.repositories import IChatSessionRepository


class SessionAccessGate:
    """Resolves a session id to a session the requesting tenant owns.

    Missing sessions and sessions owned by another tenant raise the same
    error, so a tenant cannot learn whether another tenant's session exists.
    """

    def __init__(
        self,
        session: AsyncSession,
        session_repository: IChatSessionRepository,
        probe: SessionServiceProbe | None = None,
    ):
        self._session = session
        self._session_repository = session_repository
        self._probe = probe or DefaultSessionServiceProbe()

    async def authorize(self, tenant_id: str, session_id: int) -> ChatSession:
        """Load a session filtered by both id and owning tenant.

        Args:
            tenant_id: The authenticated tenant
            session_id: The requested session

        Returns:
            The ChatSession owned by the tenant

        Raises:
            SessionNotFoundError: If no session matches both filters
            PersistenceError: If the store lookup fails
        """
        async with self._session.begin():
            chat_session = await self._session_repository.get_for_tenant(
                session_id, tenant_id
            )

        if chat_session is None:
            self._probe.session_access_denied(session_id=session_id, tenant_id=tenant_id)
            raise SessionNotFoundError("Session not found or unauthorized")

        return chat_session
