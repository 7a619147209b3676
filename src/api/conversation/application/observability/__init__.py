"""Application-level observability for the conversation context."""

from conversation.application.observability.replay_engine_probe import (
    DefaultReplayEngineProbe,
    ReplayEngineProbe,
)
from conversation.application.observability.session_service_probe import (
    DefaultSessionServiceProbe,
    SessionServiceProbe,
)

__all__ = [
    "DefaultReplayEngineProbe",
    "DefaultSessionServiceProbe",
    "ReplayEngineProbe",
    "SessionServiceProbe",
]
