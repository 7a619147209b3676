"""PostgreSQL implementation of IChatSessionRepository.

Every read is filtered by the owning tenant. Transactions are owned by
the calling service.
"""

from __future__ import annotations

from sqlalchemy import func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from conversation.domain.aggregates import ChatSession, SessionSummary
from conversation.infrastructure.mappers import message_to_domain, session_to_domain
from conversation.infrastructure.models import ChatSessionModel, MessageModel
from conversation.infrastructure.observability import (
    ConversationRepositoryProbe,
    DefaultConversationRepositoryProbe,
)
from conversation.ports.repositories import IChatSessionRepository
from shared_kernel.exceptions import PersistenceError


class ChatSessionRepository(IChatSessionRepository):
    """Repository for ChatSession aggregate persistence to PostgreSQL."""

    def __init__(
        self,
        session: AsyncSession,
        probe: ConversationRepositoryProbe | None = None,
    ) -> None:
        """Initialize repository with database session.

        Args:
            session: AsyncSession from FastAPI dependency injection
            probe: Optional domain probe for observability
        """
        self._session = session
        self._probe = probe or DefaultConversationRepositoryProbe()

    async def create(self, tenant_id: str) -> ChatSession:
        """Insert an untitled session and return it with its assigned id."""
        model = ChatSessionModel(tenant_id=tenant_id, title=None)
        try:
            self._session.add(model)
            # Flush so the database assigns the id
            await self._session.flush()
        except SQLAlchemyError as e:
            self._probe.store_operation_failed("create_session", str(e))
            raise PersistenceError(f"Failed to create chat session: {e}") from e

        self._probe.session_created(session_id=model.id, tenant_id=tenant_id)
        return session_to_domain(model)

    async def get_for_tenant(
        self, session_id: int, tenant_id: str
    ) -> ChatSession | None:
        """Retrieve a session only if the tenant owns it."""
        stmt = select(ChatSessionModel).where(
            ChatSessionModel.id == session_id,
            ChatSessionModel.tenant_id == tenant_id,
        )
        try:
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            self._probe.store_operation_failed("get_session", str(e))
            raise PersistenceError(f"Failed to load chat session: {e}") from e

        if model is None:
            self._probe.session_not_found(session_id)
            return None

        return session_to_domain(model)

    async def assign_title_if_absent(self, session_id: int, title: str) -> str | None:
        """Set the title with ``UPDATE ... WHERE title IS NULL``.

        The conditional write makes concurrent first turns safe: only one
        of them stores its title and both read back the same value.
        """
        stmt = (
            update(ChatSessionModel)
            .where(
                ChatSessionModel.id == session_id,
                ChatSessionModel.title.is_(None),
            )
            .values(title=title)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self._session.execute(stmt)
            if result.rowcount == 0:
                self._probe.title_write_skipped(session_id)

            stored = await self._session.execute(
                select(ChatSessionModel.title).where(ChatSessionModel.id == session_id)
            )
            return stored.scalar_one_or_none()
        except SQLAlchemyError as e:
            self._probe.store_operation_failed("assign_title", str(e))
            raise PersistenceError(f"Failed to assign session title: {e}") from e

    async def list_latest(self, tenant_id: str) -> list[SessionSummary]:
        """List a tenant's sessions newest first, each with its latest message."""
        latest = (
            select(
                MessageModel.session_id,
                func.max(MessageModel.id).label("last_message_id"),
            )
            .group_by(MessageModel.session_id)
            .subquery()
        )
        stmt = (
            select(ChatSessionModel, MessageModel)
            .outerjoin(latest, latest.c.session_id == ChatSessionModel.id)
            .outerjoin(MessageModel, MessageModel.id == latest.c.last_message_id)
            .where(ChatSessionModel.tenant_id == tenant_id)
            .order_by(ChatSessionModel.created_at.desc(), ChatSessionModel.id.desc())
        )
        try:
            result = await self._session.execute(stmt)
            rows = result.all()
        except SQLAlchemyError as e:
            self._probe.store_operation_failed("list_sessions", str(e))
            raise PersistenceError(f"Failed to list chat sessions: {e}") from e

        return [
            SessionSummary(
                session=session_to_domain(session_model),
                last_message=(
                    message_to_domain(message_model) if message_model is not None else None
                ),
            )
            for session_model, message_model in rows
        ]
