"""Observation context for domain-oriented observability.

Observation contexts collect and manage contextual metadata for instrumentation,
following the Domain Oriented Observability pattern.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ObservationContext:
    """Immutable context containing metadata for observability.

    Captures request-scoped metadata that should be included with all
    instrumentation events. Domain identifiers such as the tenant or the
    chat session are passed to probe methods explicitly rather than kept
    here, so a probe never receives the same key twice.

    Attributes:
        request_id: Unique identifier for the current request/operation.
        extra: Additional contextual metadata.

    Example:
        context = ObservationContext(request_id="req-123")
        probe = DefaultReplayEngineProbe().with_context(context)
    """

    request_id: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        """Return the non-empty fields as logging keyword arguments."""
        result: dict[str, Any] = {}
        if self.request_id is not None:
            result["request_id"] = self.request_id
        result.update(self.extra)
        return result
