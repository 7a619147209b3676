"""Tenant aggregate for IAM context."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from iam.domain.value_objects import TenantId


@dataclass
class Tenant:
    """Tenant aggregate representing an API key holder.

    A tenant is the isolation boundary for every chat session and message:
    all conversation reads and writes are scoped by the tenant id resolved
    from the caller's API key.

    Business rules:
    - The plaintext key is never stored, only its bcrypt hash and prefix
    - Key prefixes are unique, so a prefix identifies at most one tenant
    - Only active tenants authenticate
    - Tenants can be deactivated but not reactivated, and are never deleted
    """

    id: TenantId
    name: str
    key_hash: str
    prefix: str
    created_at: datetime
    active: bool = True

    @classmethod
    def create(cls, name: str, key_hash: str, prefix: str) -> Tenant:
        """Factory method for issuing a new tenant.

        Args:
            name: Display name for the key holder
            key_hash: The hashed secret (never store plaintext)
            prefix: The key prefix used for lookup (e.g., cq_AbCdEfGhI)

        Returns:
            A new, active Tenant aggregate
        """
        return cls(
            id=TenantId.generate(),
            name=name,
            key_hash=key_hash,
            prefix=prefix,
            created_at=datetime.now(UTC),
        )

    def deactivate(self) -> None:
        """Deactivate this tenant so its key no longer authenticates.

        Raises:
            TenantAlreadyDeactivatedError: If the tenant is already inactive
        """
        from iam.ports.exceptions import TenantAlreadyDeactivatedError

        if not self.active:
            raise TenantAlreadyDeactivatedError(
                f"Tenant {self.id.value} is already deactivated"
            )

        self.active = False

    def can_authenticate(self) -> bool:
        """Check if this tenant's key may be used for authentication."""
        return self.active
