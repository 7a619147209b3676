"""Domain exceptions for IAM bounded context.

These exceptions represent domain-level errors that can occur during
tenant issuance and authentication. They should be caught and handled by
the presentation layer.
"""


class UnauthenticatedError(Exception):
    """Raised when a request carries no usable API key.

    Covers a missing or blank key, a key that is not in the expected
    format, a key that matches no tenant, and a key whose tenant has been
    deactivated. The presentation layer maps every case to the same 401
    response without saying which one occurred.
    """

    pass


class DuplicateTenantKeyError(Exception):
    """Raised when a newly generated key collides with an existing one.

    The key prefix is unique per tenant. A collision is astronomically
    unlikely but is treated as retryable by the tenant registry, which
    generates a fresh key and tries again.
    """

    pass


class TenantAlreadyDeactivatedError(Exception):
    """Raised when attempting to deactivate a tenant that is already inactive."""

    pass
