"""Domain probe for calls to the conversational model."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class OracleProbe(Protocol):
    """Domain probe for conversational model calls."""

    def reply_generated(self, model: str, history_length: int, empty: bool) -> None:
        """Record that the model answered a turn."""
        ...

    def title_generated(self, model: str) -> None:
        """Record that the model produced a title."""
        ...

    def oracle_request_failed(self, operation: str, model: str, error: str) -> None:
        """Record that a model request failed at the transport or API level."""
        ...

    def with_context(self, context: ObservationContext) -> OracleProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultOracleProbe:
    """Default implementation of OracleProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultOracleProbe:
        """Create a new probe with observation context bound."""
        return DefaultOracleProbe(logger=self._logger, context=context)

    def reply_generated(self, model: str, history_length: int, empty: bool) -> None:
        self._logger.info(
            "oracle_reply_generated",
            model=model,
            history_length=history_length,
            empty=empty,
            **self._get_context_kwargs(),
        )

    def title_generated(self, model: str) -> None:
        self._logger.debug(
            "oracle_title_generated",
            model=model,
            **self._get_context_kwargs(),
        )

    def oracle_request_failed(self, operation: str, model: str, error: str) -> None:
        self._logger.error(
            "oracle_request_failed",
            operation=operation,
            model=model,
            error=error,
            **self._get_context_kwargs(),
        )
