"""Application services for the conversation bounded context."""

from conversation.application.services.replay_engine import NO_RESPONSE_TEXT, ReplayEngine
from conversation.application.services.session_service import (
    DEFAULT_TITLE,
    SessionService,
    normalize_title,
)

__all__ = [
    "DEFAULT_TITLE",
    "NO_RESPONSE_TEXT",
    "ReplayEngine",
    "SessionService",
    "normalize_title",
]
