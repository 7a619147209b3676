"""Protocol for session lifecycle observability.

Defines the interface for domain probes that capture application-level
domain events for chat session creation, titling and access checks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class SessionServiceProbe(Protocol):
    """Domain probe for session lifecycle operations."""

    def session_started(self, session_id: int, tenant_id: str) -> None:
        """Record that a new session was created."""
        ...

    def session_titled(self, session_id: int, title: str) -> None:
        """Record that a session received its title."""
        ...

    def title_already_present(self, session_id: int) -> None:
        """Record that a concurrent turn titled the session first."""
        ...

    def title_generation_failed(self, session_id: int, error: str) -> None:
        """Record that the model could not produce a title."""
        ...

    def sessions_listed(self, tenant_id: str, count: int) -> None:
        """Record that a tenant's sessions were listed."""
        ...

    def session_access_denied(self, session_id: int, tenant_id: str) -> None:
        """Record that a session was absent or owned by another tenant."""
        ...

    def with_context(self, context: ObservationContext) -> SessionServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultSessionServiceProbe:
    """Default implementation of SessionServiceProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultSessionServiceProbe:
        """Create a new probe with observation context bound."""
        return DefaultSessionServiceProbe(logger=self._logger, context=context)

    def session_started(self, session_id: int, tenant_id: str) -> None:
        self._logger.info(
            "session_started",
            session_id=session_id,
            tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def session_titled(self, session_id: int, title: str) -> None:
        self._logger.info(
            "session_titled",
            session_id=session_id,
            title=title,
            **self._get_context_kwargs(),
        )

    def title_already_present(self, session_id: int) -> None:
        self._logger.debug(
            "title_already_present",
            session_id=session_id,
            **self._get_context_kwargs(),
        )

    def title_generation_failed(self, session_id: int, error: str) -> None:
        """Record that the model could not produce a title.

        The session still gets the fallback title, so this is a warning.
        """
        self._logger.warning(
            "title_generation_failed",
            session_id=session_id,
            error=error,
            **self._get_context_kwargs(),
        )

    def sessions_listed(self, tenant_id: str, count: int) -> None:
        self._logger.debug(
            "sessions_listed",
            tenant_id=tenant_id,
            count=count,
            **self._get_context_kwargs(),
        )

    def session_access_denied(self, session_id: int, tenant_id: str) -> None:
        self._logger.info(
            "session_access_denied",
            session_id=session_id,
            tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )
