"""Port for the conversational model.

The model is stateless from the service's point of view: every call
carries the full context it needs.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from conversation.domain.transcript import TranscriptEntry


@runtime_checkable
class IConversationOracle(Protocol):
    """Conversational model capable of replying and titling."""

    async def generate_reply(
        self,
        prior_context: Sequence[TranscriptEntry],
        current_turn: str,
    ) -> str | None:
        """Produce the next bot turn.

        Args:
            prior_context: Earlier turns, oldest first, excluding the current one
            current_turn: The user text to answer

        Returns:
            The reply text, or None/empty if the model produced no text

        Raises:
            OracleError: On transport or protocol failure
        """
        ...

    async def generate_title(self, seed_text: str) -> str:
        """Produce a short, free-form title for a conversation.

        Args:
            seed_text: The first user message

        Returns:
            A title of a few words

        Raises:
            OracleError: On transport or protocol failure
        """
        ...
