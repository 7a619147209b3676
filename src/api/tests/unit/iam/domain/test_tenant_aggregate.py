"""Unit tests for the Tenant aggregate."""

from datetime import UTC, datetime

import pytest

from iam.domain.aggregates import Tenant
from iam.domain.value_objects import TenantId
from iam.ports.exceptions import TenantAlreadyDeactivatedError


class TestTenantCreate:
    """Tests for Tenant.create factory method."""

    def test_creates_active_tenant(self):
        """New tenants should be able to authenticate."""
        tenant = Tenant.create(name="acme", key_hash="$2b$12$hash", prefix="cq_AbCdEfGhI")

        assert tenant.active is True
        assert tenant.can_authenticate() is True

    def test_generates_ulid_id(self):
        """Tenant id should be a valid ULID."""
        tenant = Tenant.create(name="acme", key_hash="$2b$12$hash", prefix="cq_AbCdEfGhI")

        assert isinstance(tenant.id, TenantId)
        assert len(tenant.id.value) == 26
        assert TenantId.from_string(tenant.id.value) == tenant.id

    def test_sets_created_at_in_utc(self):
        """created_at should be timezone-aware UTC."""
        before = datetime.now(UTC)
        tenant = Tenant.create(name="acme", key_hash="$2b$12$hash", prefix="cq_AbCdEfGhI")

        assert tenant.created_at.tzinfo is not None
        assert tenant.created_at >= before

    def test_distinct_tenants_get_distinct_ids(self):
        first = Tenant.create(name="a", key_hash="h1", prefix="cq_111111111")
        second = Tenant.create(name="a", key_hash="h2", prefix="cq_222222222")

        assert first.id != second.id


class TestTenantDeactivate:
    """Tests for Tenant.deactivate."""

    def test_deactivated_tenant_cannot_authenticate(self):
        tenant = Tenant.create(name="acme", key_hash="h", prefix="cq_AbCdEfGhI")

        tenant.deactivate()

        assert tenant.active is False
        assert tenant.can_authenticate() is False

    def test_deactivating_twice_raises(self):
        tenant = Tenant.create(name="acme", key_hash="h", prefix="cq_AbCdEfGhI")
        tenant.deactivate()

        with pytest.raises(TenantAlreadyDeactivatedError):
            tenant.deactivate()


class TestTenantId:
    """Tests for the TenantId value object."""

    def test_from_string_rejects_invalid_ulid(self):
        with pytest.raises(ValueError, match="Invalid TenantId"):
            TenantId.from_string("not-a-ulid")

    def test_str_returns_value(self):
        tenant_id = TenantId.generate()
        assert str(tenant_id) == tenant_id.value
