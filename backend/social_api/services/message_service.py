"""
Social Media API Backend: Message Service
===========================================

What:  Message validation and CRUD orchestration.
Who:   Called by the /messages and /accounts/{accountId}/messages handlers.

Text Rule (create and update):
    messageText must be present, not blank, and at most
    MESSAGE_TEXT_MAX_LENGTH characters.

Ownership:
    update and delete act on any message id; there is no author check.
"""

import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from social_api.exceptions import DatabaseError
from social_api.models.message import Message, current_epoch_millis
from social_api.repositories.account_repository import AccountRepository
from social_api.repositories.message_repository import MessageRepository
from social_api.schemas.message import MessageRequest

logger = logging.getLogger(__name__)

MESSAGE_TEXT_MAX_LENGTH = 255


def is_valid_message_text(text: Optional[str]) -> bool:
    """True when text is non-blank and within MESSAGE_TEXT_MAX_LENGTH."""
    return text is not None and bool(text.strip()) and len(text) <= MESSAGE_TEXT_MAX_LENGTH


def _database_error(action: str, e: Exception) -> DatabaseError:
    logger.error("Database error while %s: %s", action, str(e), exc_info=True)
    return DatabaseError(
        message=f"Could not complete the request while {action}. Please try again.",
        context={"error_type": type(e).__name__},
    )


class MessageService:
    """
    Business logic layer for message operations.

    Responsibilities:
        - create_message(): validate text and author, then persist
        - get_all_messages() / get_message_by_id() / get_messages_by_user()
        - update_message(): replace messageText on an existing message
        - delete_message(): remove by id, silently ignoring unknown ids
    """

    async def create_message(self, db: AsyncSession, candidate: MessageRequest) -> Optional[Message]:
        """
        Create a message.

        Returns:
            The stored Message, or None when the text is invalid or postedBy
            does not reference an existing account.
        """
        if not is_valid_message_text(candidate.message_text):
            logger.info("Message rejected: text blank or longer than %d", MESSAGE_TEXT_MAX_LENGTH)
            return None

        try:
            if not await AccountRepository(db).exists_by_id(candidate.posted_by):
                logger.info("Message rejected: postedBy %s is not an account", candidate.posted_by)
                return None

            posted_at = candidate.posted_at
            if posted_at is None:
                posted_at = current_epoch_millis()

            message = await MessageRepository(db).save(
                Message(
                    posted_by=candidate.posted_by,
                    message_text=candidate.message_text,
                    posted_at=posted_at,
                )
            )
        except SQLAlchemyError as e:
            raise _database_error("creating a message", e)

        logger.info("Message %d created by account %d", message.id, message.posted_by)
        return message

    async def get_all_messages(self, db: AsyncSession) -> List[Message]:
        try:
            return await MessageRepository(db).find_all()
        except SQLAlchemyError as e:
            raise _database_error("listing messages", e)

    async def get_message_by_id(self, db: AsyncSession, message_id: int) -> Optional[Message]:
        try:
            return await MessageRepository(db).find_by_id(message_id)
        except SQLAlchemyError as e:
            raise _database_error("fetching a message", e)

    async def delete_message(self, db: AsyncSession, message_id: int) -> int:
        """
        Delete a message unconditionally.

        Returns:
            Rows removed: 1 if the message existed, 0 otherwise (no error).
        """
        try:
            deleted = await MessageRepository(db).delete_by_id(message_id)
        except SQLAlchemyError as e:
            raise _database_error("deleting a message", e)

        if deleted:
            logger.info("Message %d deleted", message_id)
        return deleted

    async def update_message(
        self,
        db: AsyncSession,
        message_id: int,
        patch: MessageRequest,
    ) -> Optional[Message]:
        """
        Replace the text of an existing message.

        Only patch.message_text is read; author and timestamp are untouched.

        Returns:
            The updated Message, or None when the id is unknown or the new
            text is invalid (the stored text is left unchanged).
        """
        messages = MessageRepository(db)
        try:
            existing = await messages.find_by_id(message_id)
            if existing is None:
                logger.info("Update rejected: message %d does not exist", message_id)
                return None

            if not is_valid_message_text(patch.message_text):
                logger.info("Update rejected for message %d: invalid text", message_id)
                return None

            existing.message_text = patch.message_text
            updated = await messages.save(existing)
        except SQLAlchemyError as e:
            raise _database_error("updating a message", e)

        logger.info("Message %d updated", message_id)
        return updated

    async def get_messages_by_user(self, db: AsyncSession, account_id: int) -> List[Message]:
        """All messages whose postedBy equals account_id (empty if none)."""
        try:
            return await MessageRepository(db).find_by_posted_by(account_id)
        except SQLAlchemyError as e:
            raise _database_error("listing an account's messages", e)


# ── Singleton Instance ────────────────────────────────────────────────────
message_service = MessageService()
