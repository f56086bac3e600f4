"""
Social Media API Backend: Account Route Handlers
=================================================

What:  POST /register and POST /login.

Status mapping:
    register: 200 + account | 409 username taken | 400 anything else
    login:    200 + account | 401 unknown username or wrong password
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from social_api.database import get_db_session
from social_api.exceptions import AuthenticationError, ConflictError, ValidationError
from social_api.schemas.account import AccountRequest, AccountResponse
from social_api.schemas.common import ErrorResponse
from social_api.services.account_service import PASSWORD_MIN_LENGTH, account_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Accounts"])


async def register(
    body: AccountRequest,
    db: AsyncSession = Depends(get_db_session),
) -> AccountResponse:
    """
    Register a new account.

    On rejection, a second lookup by username decides between 409 (an account
    with that name exists) and 400 (the candidate itself is invalid).
    """
    account = await account_service.register(db, body)
    if account is not None:
        return AccountResponse.from_model(account)

    if await account_service.login(db, body) is not None:
        raise ConflictError(
            message=f"Username '{body.username}' is already taken",
            context={"field": "username"},
        )

    raise ValidationError(
        message=(
            f"Username must not be blank and password must be at least "
            f"{PASSWORD_MIN_LENGTH} characters"
        ),
    )


async def login(
    body: AccountRequest,
    db: AsyncSession = Depends(get_db_session),
) -> AccountResponse:
    """Succeeds only when the stored password equals the supplied one."""
    stored = await account_service.login(db, body)
    if stored is None or stored.password != body.password:
        raise AuthenticationError()
    return AccountResponse.from_model(stored)


# ── Routing Table ─────────────────────────────────────────────────────────
ROUTES = [
    (
        "POST", "/register", register,
        {
            "response_model": AccountResponse,
            "summary": "Register a new account",
            "responses": {
                400: {"description": "Blank username or short password", "model": ErrorResponse},
                409: {"description": "Username already taken", "model": ErrorResponse},
            },
        },
    ),
    (
        "POST", "/login", login,
        {
            "response_model": AccountResponse,
            "summary": "Log in with username and password",
            "responses": {
                401: {"description": "Invalid credentials", "model": ErrorResponse},
            },
        },
    ),
]

for method, path, endpoint, options in ROUTES:
    router.add_api_route(path, endpoint, methods=[method], **options)
