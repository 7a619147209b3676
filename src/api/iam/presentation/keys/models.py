"""Pydantic models for API key issuance requests and responses."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from iam.domain.aggregates import Tenant
from shared_kernel.api_models import ApiModel


class GenerateKeyRequest(ApiModel):
    """Request model for issuing a new tenant API key.

    The key itself is generated server-side and returned only once
    in the creation response.
    """

    name: str = Field(
        ...,
        description="Display name for the key holder",
        min_length=1,
        max_length=255,
    )


class TenantResponse(ApiModel):
    """Response model for a tenant record (without key)."""

    id: str = Field(..., description="Tenant ID (ULID format)")
    name: str = Field(..., description="Display name")
    prefix: str = Field(..., description="Key prefix for identification (e.g., cq_abc123)")
    active: bool = Field(..., description="Whether the key can authenticate")
    created_at: datetime = Field(..., description="When the key was issued")

    @classmethod
    def from_domain(cls, tenant: Tenant) -> TenantResponse:
        """Convert domain Tenant aggregate to API response.

        Args:
            tenant: Tenant domain aggregate

        Returns:
            TenantResponse (without key or hash)
        """
        return cls(
            id=tenant.id.value,
            name=tenant.name,
            prefix=tenant.prefix,
            active=tenant.active,
            created_at=tenant.created_at,
        )


class GeneratedKeyResponse(TenantResponse):
    """Response model for a newly issued key (includes the key).

    The key is returned ONLY in this response at creation time.
    Store it securely - it cannot be retrieved again.
    """

    key: str = Field(
        ...,
        description="The API key. SAVE THIS - it cannot be retrieved again.",
    )
