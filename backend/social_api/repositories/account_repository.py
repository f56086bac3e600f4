"""
Social Media API Backend: Account Repository
==============================================

What:  Storage adapter for the `account` table.
Who:   AccountService (register/login) and MessageService (postedBy check).
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from social_api.models.account import Account


class AccountRepository:
    """CRUD and username lookup for accounts."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def save(self, account: Account) -> Account:
        """
        Inserts (or updates) an account and returns it with its id assigned.

        Raises:
            sqlalchemy.exc.IntegrityError: username collides with the unique index
        """
        self.db.add(account)
        await self.db.flush()
        await self.db.refresh(account)
        return account

    async def find_by_id(self, account_id: Optional[int]) -> Optional[Account]:
        if account_id is None:
            return None
        return await self.db.get(Account, account_id)

    async def find_by_username(self, username: Optional[str]) -> Optional[Account]:
        """Exact, case-sensitive match on username. Uses the unique index."""
        if username is None:
            return None
        result = await self.db.execute(
            select(Account).where(Account.username == username)
        )
        return result.scalar_one_or_none()

    async def exists_by_id(self, account_id: Optional[int]) -> bool:
        if account_id is None:
            return False
        result = await self.db.execute(
            select(Account.id).where(Account.id == account_id).limit(1)
        )
        return result.scalar_one_or_none() is not None
