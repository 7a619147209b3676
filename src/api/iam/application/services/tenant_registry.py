"""Tenant registry application service for IAM bounded context.

Issues API keys to new tenants and resolves presented keys back to the
tenant they belong to. The tenant is the isolation boundary for every
conversation operation.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from iam.application.observability import (
    DefaultTenantRegistryProbe,
    TenantRegistryProbe,
)
from iam.application.security import (
    extract_prefix,
    generate_api_key_secret,
    hash_api_key_secret,
    is_well_formed,
    verify_api_key_secret,
)
from iam.domain.aggregates import Tenant
from iam.ports.exceptions import DuplicateTenantKeyError, UnauthenticatedError
from iam.ports.repositories import ITenantRepository
from shared_kernel.exceptions import PersistenceError

MAX_ISSUE_ATTEMPTS = 3


class TenantRegistry:
    """Application service for tenant issuance and authentication.

    Manages database transactions: every repository call runs inside its
    own ``session.begin()`` block so no transaction is left open on the
    request's shared session.
    """

    def __init__(
        self,
        session: AsyncSession,
        tenant_repository: ITenantRepository,
        probe: TenantRegistryProbe | None = None,
    ):
        """Initialize TenantRegistry with dependencies.

        Args:
            session: Database session for transaction management
            tenant_repository: Repository for tenant persistence
            probe: Optional domain probe for observability
        """
        self._session = session
        self._tenant_repository = tenant_repository
        self._probe = probe or DefaultTenantRegistryProbe()

    async def issue(self, name: str) -> tuple[Tenant, str]:
        """Issue a new tenant with a freshly generated API key.

        Generates a secure key, hashes it, creates the aggregate and
        persists it. A key collision is retried with a new key up to
        MAX_ISSUE_ATTEMPTS times. The plaintext key is only available
        in the return value.

        Args:
            name: Display name for the key holder

        Returns:
            Tuple of (Tenant aggregate, plaintext API key)

        Raises:
            PersistenceError: If the store fails or no unique key could be allocated
        """
        try:
            for attempt in range(1, MAX_ISSUE_ATTEMPTS + 1):
                plaintext_secret = generate_api_key_secret()
                tenant = Tenant.create(
                    name=name,
                    key_hash=hash_api_key_secret(plaintext_secret),
                    prefix=extract_prefix(plaintext_secret),
                )

                try:
                    async with self._session.begin():
                        await self._tenant_repository.save(tenant)
                except DuplicateTenantKeyError:
                    self._probe.tenant_key_collision(attempt=attempt)
                    continue

                self._probe.tenant_issued(tenant_id=tenant.id.value, name=name)
                return tenant, plaintext_secret

            raise PersistenceError(
                f"Could not allocate a unique API key after {MAX_ISSUE_ATTEMPTS} attempts"
            )

        except Exception as e:
            self._probe.tenant_issue_failed(name=name, error=str(e))
            raise

    async def authenticate(self, secret: str | None) -> Tenant:
        """Resolve a presented API key to an active tenant.

        Args:
            secret: The plaintext API key from the request, if any

        Returns:
            The active Tenant the key belongs to

        Raises:
            UnauthenticatedError: If the key is missing, malformed, unknown or inactive
            PersistenceError: If the store lookup fails
        """
        if secret is None or not secret.strip():
            self._probe.authentication_failed(reason="missing")
            raise UnauthenticatedError("API key is missing")

        if not is_well_formed(secret):
            self._probe.authentication_failed(reason="malformed")
            raise UnauthenticatedError("API key is invalid")

        async with self._session.begin():
            tenant = await self._tenant_repository.get_by_prefix(extract_prefix(secret))

        if tenant is None or not verify_api_key_secret(secret, tenant.key_hash):
            self._probe.authentication_failed(reason="unknown")
            raise UnauthenticatedError("API key is invalid")

        if not tenant.can_authenticate():
            self._probe.authentication_failed(reason="inactive")
            raise UnauthenticatedError("API key is invalid")

        self._probe.tenant_authenticated(tenant_id=tenant.id.value)
        return tenant
