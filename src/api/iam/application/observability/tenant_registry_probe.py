"""Protocol for tenant registry observability.

Defines the interface for domain probes that capture application-level
domain events for tenant issuance and authentication.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class TenantRegistryProbe(Protocol):
    """Domain probe for tenant registry operations."""

    def tenant_issued(self, tenant_id: str, name: str) -> None:
        """Record that a tenant and its API key were issued."""
        ...

    def tenant_key_collision(self, attempt: int) -> None:
        """Record that a generated key collided and will be regenerated."""
        ...

    def tenant_issue_failed(self, name: str, error: str) -> None:
        """Record that issuing a tenant failed."""
        ...

    def tenant_authenticated(self, tenant_id: str) -> None:
        """Record that a request authenticated as a tenant."""
        ...

    def authentication_failed(self, reason: str) -> None:
        """Record that an API key was rejected."""
        ...

    def with_context(self, context: ObservationContext) -> TenantRegistryProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultTenantRegistryProbe:
    """Default implementation of TenantRegistryProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultTenantRegistryProbe:
        """Create a new probe with observation context bound."""
        return DefaultTenantRegistryProbe(logger=self._logger, context=context)

    def tenant_issued(self, tenant_id: str, name: str) -> None:
        """Record that a tenant and its API key were issued."""
        self._logger.info(
            "tenant_issued",
            tenant_id=tenant_id,
            name=name,
            **self._get_context_kwargs(),
        )

    def tenant_key_collision(self, attempt: int) -> None:
        """Record that a generated key collided and will be regenerated."""
        self._logger.warning(
            "tenant_key_collision",
            attempt=attempt,
            **self._get_context_kwargs(),
        )

    def tenant_issue_failed(self, name: str, error: str) -> None:
        """Record that issuing a tenant failed."""
        self._logger.error(
            "tenant_issue_failed",
            name=name,
            error=error,
            **self._get_context_kwargs(),
        )

    def tenant_authenticated(self, tenant_id: str) -> None:
        """Record that a request authenticated as a tenant."""
        self._logger.debug(
            "tenant_authenticated",
            tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def authentication_failed(self, reason: str) -> None:
        """Record that an API key was rejected.

        Note: We never log the presented key.
        """
        self._logger.info(
            "authentication_failed",
            reason=reason,
            **self._get_context_kwargs(),
        )
