"""HTTP routes for API key issuance."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from iam.application.services import TenantRegistry
from iam.dependencies.tenant import get_tenant_registry
from iam.presentation.keys.models import (
    GeneratedKeyResponse,
    GenerateKeyRequest,
    TenantResponse,
)
from shared_kernel.exceptions import PersistenceError

router = APIRouter(
    prefix="/api/keys",
    tags=["Admin"],
)


@router.post("/generate", status_code=status.HTTP_201_CREATED)
async def generate_api_key(
    request: GenerateKeyRequest,
    registry: Annotated[TenantRegistry, Depends(get_tenant_registry)],
) -> GeneratedKeyResponse:
    """Issue a new tenant and its API key.

    The plaintext key is returned ONLY in this response. Send it in the
    X-API-Key header of every chat request.

    Args:
        request: Key issuance request (display name)
        registry: Tenant registry for orchestration

    Returns:
        GeneratedKeyResponse with tenant details and plaintext key

    Raises:
        HTTPException: 500 if the key could not be stored
    """
    try:
        tenant, plaintext_secret = await registry.issue(name=request.name)
    except PersistenceError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate API key",
        ) from e

    return GeneratedKeyResponse(
        key=plaintext_secret,
        **TenantResponse.from_domain(tenant).model_dump(),
    )
