"""Transcript reconstruction for conversation replay.

A transcript is the stored history of a session re-expressed in the
conversational model's role vocabulary. The store says ``user``/``bot``;
the model expects ``user``/``model``. The mapping lives in one table here
so neither vocabulary leaks into the other side.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping

from conversation.domain.aggregates import Message
from conversation.domain.value_objects import OracleRole, Sender

SENDER_ROLES: Mapping[Sender, OracleRole] = {
    Sender.USER: OracleRole.USER,
    Sender.BOT: OracleRole.MODEL,
}


@dataclass(frozen=True)
class TranscriptEntry:
    """One turn as the model sees it."""

    role: OracleRole
    text: str


@dataclass(frozen=True)
class Transcript:
    """Ordered transcript split for a single request to the model.

    ``prior_context`` is the conversation memory handed to the model and
    ``current_turn`` is the new input. The current turn appears exactly
    once, never inside ``prior_context``.
    """

    prior_context: tuple[TranscriptEntry, ...]
    current_turn: str

    @classmethod
    def from_history(cls, history: Iterable[Message]) -> Transcript:
        """Build a transcript from stored messages in ascending order.

        Args:
            history: The session's messages, oldest first, ending with the
                user turn being answered

        Returns:
            Transcript whose current turn is the last message's text

        Raises:
            ValueError: If the history is empty
        """
        entries = [to_entry(message) for message in history]
        if not entries:
            raise ValueError("Cannot build a transcript from an empty history")

        *prior, current = entries
        return cls(prior_context=tuple(prior), current_turn=current.text)


def to_entry(message: Message) -> TranscriptEntry:
    """Map a stored message onto the model's role vocabulary."""
    return TranscriptEntry(role=SENDER_ROLES[message.sender], text=message.content)
