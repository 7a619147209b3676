"""Shared middleware for cross-cutting concerns.

This module contains FastAPI middleware and dependencies that are shared
across bounded contexts. Request context binding is the primary component,
giving every log event of a request a common ``request_id``.
"""

from shared_kernel.middleware.request_context import (
    REQUEST_ID_HEADER,
    get_observation_context,
    request_context_middleware,
)

__all__ = [
    "REQUEST_ID_HEADER",
    "get_observation_context",
    "request_context_middleware",
]
