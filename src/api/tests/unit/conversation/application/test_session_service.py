"""Unit tests for SessionService.

Tests drive the service against the in-memory fakes so titling can be
checked against what the store actually holds.
"""

from unittest.mock import create_autospec

import pytest

from conversation.application.observability import SessionServiceProbe
from conversation.application.services import DEFAULT_TITLE, SessionService, normalize_title
from conversation.application.services.session_service import MAX_TITLE_LENGTH
from conversation.domain.value_objects import Sender
from conversation.ports.exceptions import OracleError


@pytest.fixture
def mock_probe():
    return create_autospec(SessionServiceProbe, instance=True)


@pytest.fixture
def probed_service(mock_session, session_repository, message_repository, oracle, mock_probe):
    return SessionService(
        session=mock_session,
        session_repository=session_repository,
        message_repository=message_repository,
        oracle=oracle,
        probe=mock_probe,
    )


class TestNormalizeTitle:
    """Tests for normalize_title."""

    @pytest.mark.parametrize("raw", [None, "", "   ", '""', "\n\t"])
    def test_unusable_input_returns_none(self, raw):
        assert normalize_title(raw) is None

    def test_collapses_whitespace(self):
        assert normalize_title("  Trip \n to   Paris ") == "Trip to Paris"

    def test_strips_surrounding_quotes(self):
        assert normalize_title('"Trip to Paris"') == "Trip to Paris"
        assert normalize_title("'Budget review'") == "Budget review"

    def test_truncates_to_column_width(self):
        title = normalize_title("word " * 200)

        assert title is not None
        assert len(title) <= MAX_TITLE_LENGTH


class TestStartSession:
    """Tests for SessionService.start_session."""

    @pytest.mark.asyncio
    async def test_creates_untitled_session_for_tenant(self, probed_service, store, mock_probe):
        chat_session = await probed_service.start_session("tenant-a")

        assert chat_session.title is None
        assert chat_session.tenant_id == "tenant-a"
        assert store.sessions[chat_session.id].tenant_id == "tenant-a"
        mock_probe.session_started.assert_called_once_with(
            session_id=chat_session.id, tenant_id="tenant-a"
        )

    @pytest.mark.asyncio
    async def test_each_session_gets_a_new_id(self, session_service):
        first = await session_service.start_session("tenant-a")
        second = await session_service.start_session("tenant-a")

        assert first.id != second.id


class TestEnsureTitled:
    """Tests for SessionService.ensure_titled."""

    @pytest.mark.asyncio
    async def test_uses_generated_title(self, session_service, oracle, store):
        oracle.title = '  "Weekend trip ideas" '
        chat_session = await session_service.start_session("tenant-a")

        await session_service.ensure_titled(chat_session, "Where should I go this weekend?")

        assert chat_session.title == "Weekend trip ideas"
        assert store.sessions[chat_session.id].title == "Weekend trip ideas"
        assert oracle.title_calls == ["Where should I go this weekend?"]

    @pytest.mark.asyncio
    async def test_oracle_error_falls_back_to_default(
        self, probed_service, oracle, store, mock_probe
    ):
        oracle.title_error = OracleError("quota exceeded")
        chat_session = await probed_service.start_session("tenant-a")

        await probed_service.ensure_titled(chat_session, "Hello")

        assert chat_session.title == DEFAULT_TITLE
        assert store.sessions[chat_session.id].title == DEFAULT_TITLE
        mock_probe.title_generation_failed.assert_called_once_with(
            session_id=chat_session.id, error="quota exceeded"
        )

    @pytest.mark.asyncio
    async def test_unexpected_error_falls_back_to_default(self, session_service, oracle):
        oracle.title_error = RuntimeError("sdk bug")
        chat_session = await session_service.start_session("tenant-a")

        await session_service.ensure_titled(chat_session, "Hello")

        assert chat_session.title == DEFAULT_TITLE

    @pytest.mark.asyncio
    async def test_blank_title_falls_back_to_default(self, session_service, oracle):
        oracle.title = "   "
        chat_session = await session_service.start_session("tenant-a")

        await session_service.ensure_titled(chat_session, "Hello")

        assert chat_session.title == DEFAULT_TITLE

    @pytest.mark.asyncio
    async def test_titled_session_is_left_alone(self, session_service, oracle, store):
        chat_session = await session_service.start_session("tenant-a")
        await session_service.ensure_titled(chat_session, "First")
        oracle.title = "Another title"

        await session_service.ensure_titled(chat_session, "Second")

        assert oracle.title_calls == ["First"]
        assert store.sessions[chat_session.id].title == "Generated Title"

    @pytest.mark.asyncio
    async def test_never_overwrites_title_already_in_store(
        self, probed_service, oracle, store, mock_probe
    ):
        """A stale aggregate must not replace a title another turn stored."""
        chat_session = await probed_service.start_session("tenant-a")
        store.sessions[chat_session.id].title = "Won the race"
        oracle.title = "Lost the race"

        await probed_service.ensure_titled(chat_session, "Hello")

        assert store.sessions[chat_session.id].title == "Won the race"
        assert chat_session.title == "Won the race"
        mock_probe.title_already_present.assert_called_once_with(session_id=chat_session.id)
        mock_probe.session_titled.assert_not_called()


class TestListSessions:
    """Tests for SessionService.list_sessions."""

    @pytest.mark.asyncio
    async def test_lists_newest_first_with_last_message(
        self, session_service, message_repository
    ):
        older = await session_service.start_session("tenant-a")
        newer = await session_service.start_session("tenant-a")
        await message_repository.append(older.id, Sender.USER, "hi")
        await message_repository.append(older.id, Sender.BOT, "hello")

        summaries = await session_service.list_sessions("tenant-a")

        assert [s.session.id for s in summaries] == [newer.id, older.id]
        assert summaries[0].last_message is None
        assert summaries[1].last_message is not None
        assert summaries[1].last_message.content == "hello"

    @pytest.mark.asyncio
    async def test_excludes_other_tenants(self, session_service):
        await session_service.start_session("tenant-a")
        await session_service.start_session("tenant-b")

        summaries = await session_service.list_sessions("tenant-b")

        assert [s.session.tenant_id for s in summaries] == ["tenant-b"]


class TestHistory:
    """Tests for SessionService.history."""

    @pytest.mark.asyncio
    async def test_returns_messages_in_order_and_is_repeatable(
        self, session_service, message_repository
    ):
        chat_session = await session_service.start_session("tenant-a")
        for sender, text in [(Sender.USER, "A"), (Sender.BOT, "r1"), (Sender.USER, "B")]:
            await message_repository.append(chat_session.id, sender, text)

        first = await session_service.history(chat_session)
        second = await session_service.history(chat_session)

        assert [m.content for m in first] == ["A", "r1", "B"]
        assert [m.id for m in first] == sorted(m.id for m in first)
        assert first == second
