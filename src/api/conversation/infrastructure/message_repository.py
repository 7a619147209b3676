"""PostgreSQL implementation of IMessageRepository.

Messages are append-only; there is no update or delete path.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from conversation.domain.aggregates import Message
from conversation.domain.value_objects import Sender
from conversation.infrastructure.mappers import message_to_domain
from conversation.infrastructure.models import MessageModel
from conversation.infrastructure.observability import (
    ConversationRepositoryProbe,
    DefaultConversationRepositoryProbe,
)
from conversation.ports.repositories import IMessageRepository
from shared_kernel.exceptions import PersistenceError


class MessageRepository(IMessageRepository):
    """Repository for conversation turns in PostgreSQL."""

    def __init__(
        self,
        session: AsyncSession,
        probe: ConversationRepositoryProbe | None = None,
    ) -> None:
        self._session = session
        self._probe = probe or DefaultConversationRepositoryProbe()

    async def append(self, session_id: int, sender: Sender, content: str) -> Message:
        """Insert a turn; its autoincrement id places it after all earlier turns.

        Raises:
            PersistenceError: If the insert fails
        """
        model = MessageModel(session_id=session_id, sender=sender.value, content=content)
        try:
            self._session.add(model)
            await self._session.flush()
        except SQLAlchemyError as e:
            self._probe.store_operation_failed("append_message", str(e))
            raise PersistenceError(f"Failed to append message: {e}") from e

        self._probe.message_appended(
            session_id=session_id, message_id=model.id, sender=sender.value
        )
        return message_to_domain(model)

    async def history(self, session_id: int) -> list[Message]:
        """Return all turns of the session ordered by id ascending."""
        stmt = (
            select(MessageModel)
            .where(MessageModel.session_id == session_id)
            .order_by(MessageModel.id.asc())
        )
        try:
            result = await self._session.execute(stmt)
            models = result.scalars().all()
        except SQLAlchemyError as e:
            self._probe.store_operation_failed("history", str(e))
            raise PersistenceError(f"Failed to load message history: {e}") from e

        return [message_to_domain(model) for model in models]
