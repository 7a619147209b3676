"""FastAPI dependencies for the IAM bounded context."""

from iam.dependencies.authentication import (
    API_KEY_HEADER_NAME,
    api_key_header,
    get_current_tenant,
)
from iam.dependencies.tenant import (
    get_tenant_registry,
    get_tenant_registry_probe,
    get_tenant_repository,
)

__all__ = [
    "API_KEY_HEADER_NAME",
    "api_key_header",
    "get_current_tenant",
    "get_tenant_registry",
    "get_tenant_registry_probe",
    "get_tenant_repository",
]
