"""FastAPI dependency providers for the tenant registry."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from iam.application.observability import (
    DefaultTenantRegistryProbe,
    TenantRegistryProbe,
)
from iam.application.services import TenantRegistry
from iam.infrastructure.tenant_repository import TenantRepository
from infrastructure.database.dependencies import get_write_session
from shared_kernel.middleware import get_observation_context
from shared_kernel.observability_context import ObservationContext


def get_tenant_registry_probe(
    context: Annotated[ObservationContext, Depends(get_observation_context)],
) -> TenantRegistryProbe:
    """Get TenantRegistryProbe instance bound to the request context.

    Returns:
        DefaultTenantRegistryProbe instance for observability
    """
    return DefaultTenantRegistryProbe().with_context(context)


def get_tenant_repository(
    session: Annotated[AsyncSession, Depends(get_write_session)],
) -> TenantRepository:
    """Get TenantRepository instance.

    Args:
        session: Async database session

    Returns:
        TenantRepository instance
    """
    return TenantRepository(session=session)


def get_tenant_registry(
    tenant_repo: Annotated[TenantRepository, Depends(get_tenant_repository)],
    session: Annotated[AsyncSession, Depends(get_write_session)],
    probe: Annotated[TenantRegistryProbe, Depends(get_tenant_registry_probe)],
) -> TenantRegistry:
    """Get TenantRegistry instance.

    Args:
        tenant_repo: Tenant repository (shares session via FastAPI dependency caching)
        session: Database session for transaction management
        probe: Tenant registry probe for observability

    Returns:
        TenantRegistry instance
    """
    return TenantRegistry(
        session=session,
        tenant_repository=tenant_repo,
        probe=probe,
    )
