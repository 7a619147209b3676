"""Domain probe for chat session and message persistence.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events related to conversation storage.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class ConversationRepositoryProbe(Protocol):
    """Domain probe for conversation repository operations."""

    def session_created(self, session_id: int, tenant_id: str) -> None:
        """Record that a session row was inserted."""
        ...

    def session_not_found(self, session_id: int) -> None:
        """Record that no session matched an id and tenant."""
        ...

    def title_write_skipped(self, session_id: int) -> None:
        """Record that a conditional title write found a title already set."""
        ...

    def message_appended(self, session_id: int, message_id: int, sender: str) -> None:
        """Record that a turn was appended."""
        ...

    def store_operation_failed(self, operation: str, error: str) -> None:
        """Record that a database operation failed."""
        ...

    def with_context(self, context: ObservationContext) -> ConversationRepositoryProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultConversationRepositoryProbe:
    """Default implementation of ConversationRepositoryProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(
        self, context: ObservationContext
    ) -> DefaultConversationRepositoryProbe:
        """Create a new probe with observation context bound."""
        return DefaultConversationRepositoryProbe(logger=self._logger, context=context)

    def session_created(self, session_id: int, tenant_id: str) -> None:
        self._logger.debug(
            "chat_session_created",
            session_id=session_id,
            tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def session_not_found(self, session_id: int) -> None:
        self._logger.debug(
            "chat_session_not_found",
            session_id=session_id,
            **self._get_context_kwargs(),
        )

    def title_write_skipped(self, session_id: int) -> None:
        self._logger.debug(
            "title_write_skipped",
            session_id=session_id,
            **self._get_context_kwargs(),
        )

    def message_appended(self, session_id: int, message_id: int, sender: str) -> None:
        self._logger.debug(
            "message_appended",
            session_id=session_id,
            message_id=message_id,
            sender=sender,
            **self._get_context_kwargs(),
        )

    def store_operation_failed(self, operation: str, error: str) -> None:
        self._logger.error(
            "conversation_store_operation_failed",
            operation=operation,
            error=error,
            **self._get_context_kwargs(),
        )
