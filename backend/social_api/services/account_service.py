"""
Social Media API Backend: Account Service
===========================================

What:  Registration and login rules.
Who:   Called by the /register and /login route handlers.

Registration Rules:
    1. username must be present and not blank
    2. password must be present and at least PASSWORD_MIN_LENGTH characters
    3. username must not already exist

    Any violation returns None. The route tells "taken" (409) apart from
    "invalid" (400) by running login() afterwards: if the username resolves to
    a stored account, the failure was a conflict.

Login:
    login() only resolves the username. Comparing passwords is the caller's
    job, so the same lookup serves both the 409 decision on register and
    credential checking on login.
"""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from social_api.exceptions import DatabaseError
from social_api.models.account import Account
from social_api.repositories.account_repository import AccountRepository
from social_api.schemas.account import AccountRequest

logger = logging.getLogger(__name__)

PASSWORD_MIN_LENGTH = 4


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class AccountService:
    """
    Business logic for accounts.

    Responsibilities:
        - register(): validate and persist a new account
        - login(): resolve an account by username
    """

    async def register(self, db: AsyncSession, candidate: AccountRequest) -> Optional[Account]:
        """
        Register a new account.

        Args:
            db: Async database session
            candidate: username/password from the request body

        Returns:
            The stored Account with its id assigned, or None when the
            candidate is invalid or the username is taken.

        Raises:
            DatabaseError: Storage failed for a reason other than a duplicate
        """
        username = candidate.username
        password = candidate.password

        if _is_blank(username) or password is None or len(password) < PASSWORD_MIN_LENGTH:
            logger.info("Registration rejected: blank username or password shorter than %d", PASSWORD_MIN_LENGTH)
            return None

        accounts = AccountRepository(db)
        try:
            if await accounts.find_by_username(username) is not None:
                logger.info("Registration rejected: username '%s' already exists", username)
                return None

            account = await accounts.save(Account(username=username, password=password))

        except IntegrityError:
            # Lost a race with a concurrent registration of the same username
            await db.rollback()
            logger.warning("Registration for '%s' hit the unique username index", username)
            return None
        except SQLAlchemyError as e:
            logger.error("Database error registering '%s': %s", username, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not register the account. Please try again.",
                context={"error_type": type(e).__name__},
            )

        logger.info("Account %d registered for '%s'", account.id, username)
        return account

    async def login(self, db: AsyncSession, credentials: AccountRequest) -> Optional[Account]:
        """
        Resolve the stored account for credentials.username.

        The password is NOT checked here; the route compares
        stored.password with the supplied one.
        """
        try:
            return await AccountRepository(db).find_by_username(credentials.username)
        except SQLAlchemyError as e:
            logger.error("Database error looking up account: %s", str(e))
            raise DatabaseError(
                message="Could not look up the account. Please try again.",
                context={"error_type": type(e).__name__},
            )


# ── Singleton Instance ────────────────────────────────────────────────────
account_service = AccountService()
