"""API key authentication dependency.

Every chat endpoint resolves its caller through ``get_current_tenant``,
which reads the ``X-API-Key`` header and asks the tenant registry for the
matching active tenant.
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Security, status
from fastapi.security import APIKeyHeader

from iam.application.services import TenantRegistry
from iam.dependencies.tenant import get_tenant_registry
from iam.domain.aggregates import Tenant
from iam.ports.exceptions import UnauthenticatedError
from shared_kernel.exceptions import PersistenceError

API_KEY_HEADER_NAME = "X-API-Key"

# Registered as a security scheme so Swagger UI shows an Authorize button
api_key_header = APIKeyHeader(
    name=API_KEY_HEADER_NAME,
    scheme_name="ApiKeyAuth",
    auto_error=False,
)


async def get_current_tenant(
    registry: Annotated[TenantRegistry, Depends(get_tenant_registry)],
    api_key: Annotated[str | None, Security(api_key_header)] = None,
) -> Tenant:
    """Authenticate the request and return the calling tenant.

    Args:
        registry: Tenant registry used to resolve the key
        api_key: Raw value of the X-API-Key header, if present

    Returns:
        The active Tenant owning the presented key

    Raises:
        HTTPException: 401 if the key is missing, invalid or inactive
        HTTPException: 500 if the tenant store is unavailable
    """
    try:
        return await registry.authenticate(api_key)
    except UnauthenticatedError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": API_KEY_HEADER_NAME},
        ) from e
    except PersistenceError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to authenticate API key",
        ) from e
