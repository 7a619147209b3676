"""Repository protocols (ports) for IAM bounded context.

Repository protocols define the interface for persisting and retrieving
aggregates. Implementations are free to choose the storage engine.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from iam.domain.aggregates import Tenant


@runtime_checkable
class ITenantRepository(Protocol):
    """Repository for Tenant aggregate persistence."""

    async def save(self, tenant: Tenant) -> None:
        """Persist a tenant aggregate.

        Creates a new tenant or updates an existing one.

        Args:
            tenant: The Tenant aggregate to persist

        Raises:
            DuplicateTenantKeyError: If the key prefix or hash is already taken
            PersistenceError: If the store operation fails
        """
        ...

    async def get_by_prefix(self, prefix: str) -> Tenant | None:
        """Retrieve a tenant by its key prefix for authentication.

        Args:
            prefix: The first characters of the API key

        Returns:
            The Tenant aggregate, or None if no key has that prefix
        """
        ...
