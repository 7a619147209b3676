"""Protocol for conversation replay observability.

Captures the stages of a turn: received, user turn persisted, model
invoked, bot turn persisted, and the ways a turn can stop early.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class ReplayEngineProbe(Protocol):
    """Domain probe for conversation replay operations."""

    def turn_received(self, session_id: int, length: int) -> None:
        """Record that a user turn arrived for a session."""
        ...

    def invalid_message_rejected(self, session_id: int | None) -> None:
        """Record that a blank message was rejected before any write."""
        ...

    def user_turn_persisted(self, session_id: int, message_id: int) -> None:
        """Record that the user turn is durable."""
        ...

    def oracle_invoked(self, session_id: int, prior_turns: int) -> None:
        """Record that the transcript was sent to the model."""
        ...

    def empty_reply_replaced(self, session_id: int) -> None:
        """Record that the model returned no text and the placeholder was used."""
        ...

    def oracle_failed(self, session_id: int, error: str) -> None:
        """Record that the model call failed after the user turn was stored."""
        ...

    def bot_turn_persisted(self, session_id: int, message_id: int) -> None:
        """Record that the bot turn is durable."""
        ...

    def with_context(self, context: ObservationContext) -> ReplayEngineProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultReplayEngineProbe:
    """Default implementation of ReplayEngineProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultReplayEngineProbe:
        """Create a new probe with observation context bound."""
        return DefaultReplayEngineProbe(logger=self._logger, context=context)

    def turn_received(self, session_id: int, length: int) -> None:
        """Record that a user turn arrived for a session.

        Note: We log the length only, never the message text.
        """
        self._logger.debug(
            "turn_received",
            session_id=session_id,
            length=length,
            **self._get_context_kwargs(),
        )

    def invalid_message_rejected(self, session_id: int | None) -> None:
        self._logger.info(
            "invalid_message_rejected",
            session_id=session_id,
            **self._get_context_kwargs(),
        )

    def user_turn_persisted(self, session_id: int, message_id: int) -> None:
        self._logger.debug(
            "user_turn_persisted",
            session_id=session_id,
            message_id=message_id,
            **self._get_context_kwargs(),
        )

    def oracle_invoked(self, session_id: int, prior_turns: int) -> None:
        self._logger.debug(
            "oracle_invoked",
            session_id=session_id,
            prior_turns=prior_turns,
            **self._get_context_kwargs(),
        )

    def empty_reply_replaced(self, session_id: int) -> None:
        self._logger.warning(
            "empty_reply_replaced",
            session_id=session_id,
            **self._get_context_kwargs(),
        )

    def oracle_failed(self, session_id: int, error: str) -> None:
        self._logger.error(
            "oracle_failed",
            session_id=session_id,
            error=error,
            **self._get_context_kwargs(),
        )

    def bot_turn_persisted(self, session_id: int, message_id: int) -> None:
        self._logger.info(
            "bot_turn_persisted",
            session_id=session_id,
            message_id=message_id,
            **self._get_context_kwargs(),
        )
