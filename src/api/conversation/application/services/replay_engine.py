"""Conversation replay application service.

Runs a user turn end to end: persist the user message, rebuild the
session transcript from the store, ask the conversational model for the
next turn and persist the reply. The model keeps no memory between
calls, so every turn replays the full history.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from conversation.application.observability import (
    DefaultReplayEngineProbe,
    ReplayEngineProbe,
)
from conversation.application.services.session_service import SessionService
from conversation.application.session_locks import SessionLockRegistry
from conversation.domain.aggregates import ChatSession, Message
from conversation.domain.transcript import Transcript
from conversation.domain.value_objects import Sender
from conversation.ports.exceptions import InvalidMessageError, OracleError
from conversation.ports.oracle import IConversationOracle
from conversation.ports.repositories import IMessageRepository

NO_RESPONSE_TEXT = "No response text"


class ReplayEngine:
    """Application service that turns a user message into a bot reply.

    Each store call commits in its own transaction, so the user turn is
    durable before the model is called and survives a model failure.
    Turns on the same session are serialized through the lock registry.
    """

    def __init__(
        self,
        session: AsyncSession,
        message_repository: IMessageRepository,
        session_service: SessionService,
        oracle: IConversationOracle,
        locks: SessionLockRegistry,
        probe: ReplayEngineProbe | None = None,
    ):
        """Initialize ReplayEngine with dependencies.

        Args:
            session: Database session for transaction management
            message_repository: Repository for conversation turns
            session_service: Session lifecycle service, used for titling
            oracle: Conversational model producing replies
            locks: Registry serializing turns per session
            probe: Optional domain probe for observability
        """
        self._session = session
        self._message_repository = message_repository
        self._session_service = session_service
        self._oracle = oracle
        self._locks = locks
        self._probe = probe or DefaultReplayEngineProbe()

    async def start_conversation(
        self, tenant_id: str, user_text: str
    ) -> tuple[ChatSession, Message]:
        """Create a session for the tenant and run its first turn.

        Args:
            tenant_id: The authenticated tenant
            user_text: The opening user message

        Returns:
            Tuple of (titled ChatSession, bot Message)

        Raises:
            InvalidMessageError: If the message is blank; nothing is created
            OracleError: If the model fails; the session and user turn remain
            PersistenceError: If a store write fails
        """
        self._validate(user_text, session_id=None)

        chat_session = await self._session_service.start_session(tenant_id)
        reply = await self.process_turn(chat_session, user_text)
        return chat_session, reply

    async def process_turn(self, chat_session: ChatSession, user_text: str) -> Message:
        """Answer one user turn on an authorized session.

        Args:
            chat_session: A session the caller is authorized for; its title
                is filled in on the first turn
            user_text: The user message

        Returns:
            The persisted bot Message

        Raises:
            InvalidMessageError: If the message is blank; nothing is written
            OracleError: If the model fails; the user turn stays persisted
            PersistenceError: If a store operation fails
        """
        self._validate(user_text, session_id=chat_session.id)

        async with self._locks.hold(chat_session.id):
            self._probe.turn_received(session_id=chat_session.id, length=len(user_text))

            if not chat_session.is_titled:
                await self._session_service.ensure_titled(chat_session, user_text)

            async with self._session.begin():
                user_message = await self._message_repository.append(
                    chat_session.id, Sender.USER, user_text
                )
            self._probe.user_turn_persisted(
                session_id=chat_session.id, message_id=user_message.id
            )

            async with self._session.begin():
                history = await self._message_repository.history(chat_session.id)

            transcript = Transcript.from_history(history)
            self._probe.oracle_invoked(
                session_id=chat_session.id,
                prior_turns=len(transcript.prior_context),
            )

            try:
                reply_text = await self._oracle.generate_reply(
                    transcript.prior_context, transcript.current_turn
                )
            except OracleError as e:
                self._probe.oracle_failed(session_id=chat_session.id, error=str(e))
                raise

            if reply_text is None or not reply_text.strip():
                self._probe.empty_reply_replaced(session_id=chat_session.id)
                reply_text = NO_RESPONSE_TEXT

            async with self._session.begin():
                bot_message = await self._message_repository.append(
                    chat_session.id, Sender.BOT, reply_text
                )
            self._probe.bot_turn_persisted(
                session_id=chat_session.id, message_id=bot_message.id
            )

        return bot_message

    def _validate(self, user_text: str, session_id: int | None) -> None:
        if not user_text or not user_text.strip():
            self._probe.invalid_message_rejected(session_id=session_id)
            raise InvalidMessageError("Message must not be empty")
