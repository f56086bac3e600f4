"""
Social Media API Backend: Message Repository
==============================================

What:  Storage adapter for the `message` table.
Who:   MessageService.

Ordering:
    find_all and find_by_posted_by return rows in id (insertion) order.
"""

from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from social_api.models.message import Message


class MessageRepository:
    """CRUD and author lookup for messages."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def save(self, message: Message) -> Message:
        """Inserts or updates a message and returns the refreshed row."""
        self.db.add(message)
        await self.db.flush()
        await self.db.refresh(message)
        return message

    async def find_by_id(self, message_id: Optional[int]) -> Optional[Message]:
        if message_id is None:
            return None
        return await self.db.get(Message, message_id)

    async def find_all(self) -> List[Message]:
        result = await self.db.execute(select(Message).order_by(Message.id))
        return list(result.scalars().all())

    async def find_by_posted_by(self, account_id: int) -> List[Message]:
        """All messages whose posted_by equals account_id (idx on posted_by)."""
        result = await self.db.execute(
            select(Message)
            .where(Message.posted_by == account_id)
            .order_by(Message.id)
        )
        return list(result.scalars().all())

    async def exists_by_id(self, message_id: Optional[int]) -> bool:
        if message_id is None:
            return False
        result = await self.db.execute(
            select(Message.id).where(Message.id == message_id).limit(1)
        )
        return result.scalar_one_or_none() is not None

    async def delete_by_id(self, message_id: int) -> int:
        """
        Deletes the message with this id.

        Returns:
            Number of rows removed (0 when the id does not exist; no error).
        """
        result = await self.db.execute(
            delete(Message).where(Message.id == message_id)
        )
        return result.rowcount or 0
