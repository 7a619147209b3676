"""PostgreSQL implementation of ITenantRepository.

This repository handles persistence of tenants (API key holders) to
PostgreSQL. Driver and ORM failures are translated into domain exceptions
so the application layer never sees SQLAlchemy types.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from iam.domain.aggregates import Tenant
from iam.domain.value_objects import TenantId
from iam.infrastructure.models import TenantModel
from iam.infrastructure.observability import (
    DefaultTenantRepositoryProbe,
    TenantRepositoryProbe,
)
from iam.ports.exceptions import DuplicateTenantKeyError
from iam.ports.repositories import ITenantRepository
from shared_kernel.exceptions import PersistenceError


class TenantRepository(ITenantRepository):
    """Repository for Tenant aggregate persistence to PostgreSQL.

    The key_hash is stored for authentication, but the plaintext key is
    never persisted. Transactions are owned by the calling service.
    """

    def __init__(
        self,
        session: AsyncSession,
        probe: TenantRepositoryProbe | None = None,
    ) -> None:
        """Initialize repository with database session.

        Args:
            session: AsyncSession from FastAPI dependency injection
            probe: Optional domain probe for observability
        """
        self._session = session
        self._probe = probe or DefaultTenantRepositoryProbe()

    async def save(self, tenant: Tenant) -> None:
        """Persist tenant metadata to PostgreSQL.

        Args:
            tenant: The Tenant aggregate to persist

        Raises:
            DuplicateTenantKeyError: If the key prefix or hash is already taken
            PersistenceError: If the store operation fails
        """
        try:
            stmt = select(TenantModel).where(TenantModel.id == tenant.id.value)
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()

            if model:
                # Only the active flag is mutable
                model.active = tenant.active
            else:
                model = TenantModel(
                    id=tenant.id.value,
                    name=tenant.name,
                    key_hash=tenant.key_hash,
                    prefix=tenant.prefix,
                    active=tenant.active,
                    created_at=tenant.created_at,
                )
                self._session.add(model)

            # Flush to surface integrity errors inside the caller's transaction
            await self._session.flush()
        except IntegrityError as e:
            self._probe.duplicate_tenant_key(tenant.id.value)
            raise DuplicateTenantKeyError(
                f"API key for tenant {tenant.id.value} collides with an existing key"
            ) from e
        except SQLAlchemyError as e:
            self._probe.store_operation_failed("save", str(e))
            raise PersistenceError(f"Failed to save tenant: {e}") from e

        self._probe.tenant_saved(tenant.id.value)

    async def get_by_prefix(self, prefix: str) -> Tenant | None:
        """Retrieve a tenant by its key prefix for authentication.

        The prefix is the first 12 characters of the API key. This allows
        a single indexed lookup before the more expensive hash verification.

        Args:
            prefix: The first 12 characters of the API key

        Returns:
            The Tenant aggregate, or None if not found
        """
        stmt = select(TenantModel).where(TenantModel.prefix == prefix)
        model = await self._scalar_one_or_none(stmt, "get_by_prefix")

        if model is None:
            self._probe.tenant_not_found_by_prefix()
            return None

        self._probe.tenant_retrieved(model.id)
        return self._to_aggregate(model)

    async def _scalar_one_or_none(self, stmt, operation: str) -> TenantModel | None:
        try:
            result = await self._session.execute(stmt)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            self._probe.store_operation_failed(operation, str(e))
            raise PersistenceError(f"Failed to load tenant: {e}") from e

    def _to_aggregate(self, model: TenantModel) -> Tenant:
        """Convert SQLAlchemy model to domain aggregate.

        Args:
            model: The TenantModel to convert

        Returns:
            The Tenant domain aggregate
        """
        return Tenant(
            id=TenantId(value=model.id),
            name=model.name,
            key_hash=model.key_hash,
            prefix=model.prefix,
            created_at=model.created_at,
            active=model.active,
        )
