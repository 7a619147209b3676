"""Value objects for the conversation domain."""

from __future__ import annotations

from enum import StrEnum


class Sender(StrEnum):
    """Who authored a stored message."""

    USER = "user"
    BOT = "bot"


class OracleRole(StrEnum):
    """Role vocabulary expected by the conversational model."""

    USER = "user"
    MODEL = "model"
