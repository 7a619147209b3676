"""Domain probe for tenant repository operations.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events related to tenant persistence.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class TenantRepositoryProbe(Protocol):
    """Domain probe for tenant repository operations."""

    def tenant_saved(self, tenant_id: str) -> None:
        """Record that a tenant was successfully saved."""
        ...

    def tenant_retrieved(self, tenant_id: str) -> None:
        """Record that a tenant was retrieved."""
        ...

    def tenant_not_found_by_prefix(self) -> None:
        """Record that no tenant matched a key prefix.

        Note: We don't log the prefix for security reasons.
        """
        ...

    def duplicate_tenant_key(self, tenant_id: str) -> None:
        """Record that a tenant key violated a uniqueness constraint."""
        ...

    def store_operation_failed(self, operation: str, error: str) -> None:
        """Record that a database operation failed."""
        ...

    def with_context(self, context: ObservationContext) -> TenantRepositoryProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultTenantRepositoryProbe:
    """Default implementation of TenantRepositoryProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultTenantRepositoryProbe:
        """Create a new probe with observation context bound."""
        return DefaultTenantRepositoryProbe(logger=self._logger, context=context)

    def tenant_saved(self, tenant_id: str) -> None:
        """Record that a tenant was successfully saved."""
        self._logger.info(
            "tenant_saved",
            tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def tenant_retrieved(self, tenant_id: str) -> None:
        """Record that a tenant was retrieved."""
        self._logger.debug(
            "tenant_retrieved",
            tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def tenant_not_found_by_prefix(self) -> None:
        """Record that no tenant matched a key prefix."""
        self._logger.debug(
            "tenant_not_found_by_prefix",
            **self._get_context_kwargs(),
        )

    def duplicate_tenant_key(self, tenant_id: str) -> None:
        """Record that a tenant key violated a uniqueness constraint."""
        self._logger.warning(
            "duplicate_tenant_key",
            tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def store_operation_failed(self, operation: str, error: str) -> None:
        """Record that a database operation failed."""
        self._logger.error(
            "tenant_store_operation_failed",
            operation=operation,
            error=error,
            **self._get_context_kwargs(),
        )
