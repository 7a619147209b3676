"""Domain-Oriented Observability for IAM application layer.

Probes for application service operations following Domain-Oriented Observability patterns.
"""

from iam.application.observability.tenant_registry_probe import (
    DefaultTenantRegistryProbe,
    TenantRegistryProbe,
)

__all__ = [
    "TenantRegistryProbe",
    "DefaultTenantRegistryProbe",
]
