"""Infrastructure observability for the conversation context."""

from conversation.infrastructure.observability.conversation_repository_probe import (
    ConversationRepositoryProbe,
    DefaultConversationRepositoryProbe,
)
from conversation.infrastructure.observability.oracle_probe import (
    DefaultOracleProbe,
    OracleProbe,
)

__all__ = [
    "ConversationRepositoryProbe",
    "DefaultConversationRepositoryProbe",
    "DefaultOracleProbe",
    "OracleProbe",
]
