"""Exceptions shared across bounded contexts."""


class PersistenceError(Exception):
    """Raised when a store operation fails.

    Repositories wrap driver and ORM errors in this exception so the
    application layer never depends on SQLAlchemy exception types. It is
    surfaced to clients as a server error and is never retried.
    """

    pass
