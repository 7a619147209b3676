"""Request context middleware.

Binds a request identifier into structlog's context variables so every log
event emitted while handling a request carries the same ``request_id``.
The identifier is taken from the ``X-Request-ID`` header when the caller
supplies one, otherwise a new ULID is generated.
"""

from __future__ import annotations

from typing import Awaitable, Callable

import structlog
from fastapi import Request, Response
from ulid import ULID

from shared_kernel.observability_context import ObservationContext

REQUEST_ID_HEADER = "X-Request-ID"


async def request_context_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Bind request-scoped logging context for the duration of a request."""
    request_id = request.headers.get(REQUEST_ID_HEADER) or str(ULID())

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        request_id=request_id,
        method=request.method,
        path=request.url.path,
    )
    request.state.observation_context = ObservationContext(request_id=request_id)

    try:
        response = await call_next(request)
    finally:
        structlog.contextvars.clear_contextvars()

    response.headers[REQUEST_ID_HEADER] = request_id
    return response


def get_observation_context(request: Request) -> ObservationContext:
    """FastAPI dependency returning the context bound by the middleware."""
    context = getattr(request.state, "observation_context", None)
    if context is None:
        return ObservationContext()
    return context
