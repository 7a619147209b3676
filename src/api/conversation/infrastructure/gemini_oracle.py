"""Google Gemini implementation of IConversationOracle.

Uses the async surface of the google-genai SDK. A fresh chat is created
for every turn and seeded with the replayed history, so no state is kept
on the client between requests.
"""

from __future__ import annotations

from typing import Sequence

import httpx
from google import genai
from google.genai import errors, types

from conversation.domain.transcript import TranscriptEntry
from conversation.infrastructure.observability import DefaultOracleProbe, OracleProbe
from conversation.ports.exceptions import OracleError
from conversation.ports.oracle import IConversationOracle

TITLE_PROMPT = (
    "Generate a short title of at most five words for a conversation that "
    "starts with the message below. Reply with the title only, without "
    "quotes or punctuation at the end.\n\nMessage: {seed}"
)


class GeminiConversationOracle(IConversationOracle):
    """Conversational model backed by the Gemini API."""

    def __init__(
        self,
        client: genai.Client,
        model: str,
        title_model: str | None = None,
        probe: OracleProbe | None = None,
    ) -> None:
        """Initialize the oracle.

        Args:
            client: Configured google-genai client
            model: Model name used for replies
            title_model: Model name used for titles (defaults to ``model``)
            probe: Optional domain probe for observability
        """
        self._client = client
        self._model = model
        self._title_model = title_model or model
        self._probe = probe or DefaultOracleProbe()

    async def generate_reply(
        self,
        prior_context: Sequence[TranscriptEntry],
        current_turn: str,
    ) -> str | None:
        history = [
            types.Content(role=entry.role.value, parts=[types.Part(text=entry.text)])
            for entry in prior_context
        ]
        try:
            chat = self._client.aio.chats.create(model=self._model, history=history)
            response = await chat.send_message(current_turn)
        except (errors.APIError, httpx.HTTPError) as e:
            self._probe.oracle_request_failed("generate_reply", self._model, str(e))
            raise OracleError(f"Conversational model request failed: {e}") from e

        text = response.text
        self._probe.reply_generated(
            model=self._model,
            history_length=len(history),
            empty=not text,
        )
        return text

    async def generate_title(self, seed_text: str) -> str:
        try:
            response = await self._client.aio.models.generate_content(
                model=self._title_model,
                contents=TITLE_PROMPT.format(seed=seed_text),
            )
        except (errors.APIError, httpx.HTTPError) as e:
            self._probe.oracle_request_failed("generate_title", self._title_model, str(e))
            raise OracleError(f"Title generation request failed: {e}") from e

        self._probe.title_generated(model=self._title_model)
        return response.text or ""
