"""
Social Media API Backend: Message Service Unit Tests
======================================================

What:  Validation and orchestration in MessageService.
How:   Both repositories are patched; no database is touched.
"""

import pytest
from unittest.mock import AsyncMock, patch

from sqlalchemy.exc import OperationalError

from social_api.exceptions import DatabaseError
from social_api.models.message import Message
from social_api.schemas.message import MessageRequest
from social_api.services.message_service import MessageService, is_valid_message_text


def _saved(message):
    if message.id is None:
        message.id = 11
    return message


class TestMessageTextRule:

    def test_boundaries(self):
        assert is_valid_message_text("a")
        assert is_valid_message_text("a" * 255)
        assert not is_valid_message_text("a" * 256)
        assert not is_valid_message_text("")
        assert not is_valid_message_text(" \t\n")
        assert not is_valid_message_text(None)


class TestMessageServiceCreate:
    """Tests for create_message()."""

    def setup_method(self):
        self.service = MessageService()

    @pytest.mark.asyncio
    async def test_create_success(self, mock_db_session):
        with patch("social_api.services.message_service.AccountRepository") as mock_accounts, \
             patch("social_api.services.message_service.MessageRepository") as mock_messages:

            mock_accounts.return_value.exists_by_id = AsyncMock(return_value=True)
            mock_messages.return_value.save = AsyncMock(side_effect=_saved)

            result = await self.service.create_message(
                mock_db_session,
                MessageRequest(postedBy=1, messageText="hello", postedAt=1669947792),
            )

            assert result.id == 11
            assert result.posted_by == 1
            assert result.message_text == "hello"
            assert result.posted_at == 1669947792

    @pytest.mark.asyncio
    async def test_create_stamps_posted_at_when_missing(self, mock_db_session):
        with patch("social_api.services.message_service.AccountRepository") as mock_accounts, \
             patch("social_api.services.message_service.MessageRepository") as mock_messages, \
             patch("social_api.services.message_service.current_epoch_millis", return_value=42):

            mock_accounts.return_value.exists_by_id = AsyncMock(return_value=True)
            mock_messages.return_value.save = AsyncMock(side_effect=_saved)

            result = await self.service.create_message(
                mock_db_session, MessageRequest(postedBy=1, messageText="hello")
            )

            assert result.posted_at == 42

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", [None, "", "   ", "x" * 256])
    async def test_create_invalid_text(self, mock_db_session, text):
        with patch("social_api.services.message_service.AccountRepository") as mock_accounts, \
             patch("social_api.services.message_service.MessageRepository") as mock_messages:

            mock_accounts.return_value.exists_by_id = AsyncMock(return_value=True)
            mock_messages.return_value.save = AsyncMock()

            result = await self.service.create_message(
                mock_db_session, MessageRequest(postedBy=1, messageText=text)
            )

            assert result is None
            mock_messages.return_value.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_unknown_author(self, mock_db_session):
        with patch("social_api.services.message_service.AccountRepository") as mock_accounts, \
             patch("social_api.services.message_service.MessageRepository") as mock_messages:

            mock_accounts.return_value.exists_by_id = AsyncMock(return_value=False)
            mock_messages.return_value.save = AsyncMock()

            result = await self.service.create_message(
                mock_db_session, MessageRequest(postedBy=99, messageText="hello")
            )

            assert result is None
            mock_messages.return_value.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_database_failure(self, mock_db_session):
        with patch("social_api.services.message_service.AccountRepository") as mock_accounts:
            mock_accounts.return_value.exists_by_id = AsyncMock(
                side_effect=OperationalError("SELECT", {}, Exception("connection lost"))
            )

            with pytest.raises(DatabaseError):
                await self.service.create_message(
                    mock_db_session, MessageRequest(postedBy=1, messageText="hello")
                )


class TestMessageServiceUpdate:
    """Tests for update_message()."""

    def setup_method(self):
        self.service = MessageService()

    @pytest.mark.asyncio
    async def test_update_replaces_text_only(self, mock_db_session):
        existing = Message(id=3, posted_by=1, message_text="old", posted_at=100)
        with patch("social_api.services.message_service.MessageRepository") as mock_messages:
            repo = mock_messages.return_value
            repo.find_by_id = AsyncMock(return_value=existing)
            repo.save = AsyncMock(side_effect=_saved)

            result = await self.service.update_message(
                mock_db_session, 3, MessageRequest(postedBy=2, messageText="new", postedAt=999)
            )

            assert result.message_text == "new"
            assert result.posted_by == 1
            assert result.posted_at == 100

    @pytest.mark.asyncio
    async def test_update_unknown_id(self, mock_db_session):
        with patch("social_api.services.message_service.MessageRepository") as mock_messages:
            repo = mock_messages.return_value
            repo.find_by_id = AsyncMock(return_value=None)
            repo.save = AsyncMock()

            result = await self.service.update_message(
                mock_db_session, 3, MessageRequest(messageText="new")
            )

            assert result is None
            repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", [None, "", "  ", "y" * 256])
    async def test_update_invalid_text_leaves_message_unchanged(self, mock_db_session, text):
        existing = Message(id=3, posted_by=1, message_text="old", posted_at=100)
        with patch("social_api.services.message_service.MessageRepository") as mock_messages:
            repo = mock_messages.return_value
            repo.find_by_id = AsyncMock(return_value=existing)
            repo.save = AsyncMock()

            result = await self.service.update_message(
                mock_db_session, 3, MessageRequest(messageText=text)
            )

            assert result is None
            assert existing.message_text == "old"
            repo.save.assert_not_awaited()


class TestMessageServiceQueries:
    """Tests for get/list/delete delegation."""

    def setup_method(self):
        self.service = MessageService()

    @pytest.mark.asyncio
    async def test_get_all_messages(self, mock_db_session):
        rows = [Message(id=1, posted_by=1, message_text="a", posted_at=1)]
        with patch("social_api.services.message_service.MessageRepository") as mock_messages:
            mock_messages.return_value.find_all = AsyncMock(return_value=rows)

            assert await self.service.get_all_messages(mock_db_session) == rows

    @pytest.mark.asyncio
    async def test_get_message_by_id_missing(self, mock_db_session):
        with patch("social_api.services.message_service.MessageRepository") as mock_messages:
            mock_messages.return_value.find_by_id = AsyncMock(return_value=None)

            assert await self.service.get_message_by_id(mock_db_session, 5) is None

    @pytest.mark.asyncio
    async def test_delete_message_returns_rowcount(self, mock_db_session):
        with patch("social_api.services.message_service.MessageRepository") as mock_messages:
            mock_messages.return_value.delete_by_id = AsyncMock(return_value=0)

            assert await self.service.delete_message(mock_db_session, 5) == 0
            mock_messages.return_value.delete_by_id.assert_awaited_once_with(5)

    @pytest.mark.asyncio
    async def test_get_messages_by_user(self, mock_db_session):
        with patch("social_api.services.message_service.MessageRepository") as mock_messages:
            mock_messages.return_value.find_by_posted_by = AsyncMock(return_value=[])

            assert await self.service.get_messages_by_user(mock_db_session, 1) == []
            mock_messages.return_value.find_by_posted_by.assert_awaited_once_with(1)
