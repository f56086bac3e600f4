"""
Social Media API Backend: Message Route Handlers
=================================================

What:  Message CRUD plus the per-account message listing.

Status mapping:
    create:        200 + message | 400
    list:          200 + array (possibly empty)
    get by id:     200 + message | 200 + empty body when missing
    delete:        200 + 1       | 200 + empty body when missing
    update:        200 + 1       | 400
    list by user:  200 + array (possibly empty)

GET and DELETE never answer 404 for an unknown id; clients treat an empty
200 body as "no such message".
"""

import logging
from typing import Annotated, List, Union

from fastapi import APIRouter, Depends, Path, Response
from sqlalchemy.ext.asyncio import AsyncSession

from social_api.database import get_db_session
from social_api.exceptions import ValidationError
from social_api.schemas.common import INT32_MAX, INT32_MIN, ErrorResponse
from social_api.schemas.message import MessageRequest, MessageResponse
from social_api.services.message_service import MESSAGE_TEXT_MAX_LENGTH, message_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Messages"])

# Path ids are bound like the INTEGER primary keys they address
DatabaseId = Annotated[int, Path(ge=INT32_MIN, le=INT32_MAX)]


def _empty_ok() -> Response:
    return Response(status_code=200)


async def create_message(
    body: MessageRequest,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    message = await message_service.create_message(db, body)
    if message is None:
        raise ValidationError(
            message=(
                f"messageText must be 1-{MESSAGE_TEXT_MAX_LENGTH} characters and "
                f"postedBy must reference an existing account"
            ),
        )
    return MessageResponse.from_model(message)


async def list_messages(db: AsyncSession = Depends(get_db_session)) -> List[MessageResponse]:
    messages = await message_service.get_all_messages(db)
    return [MessageResponse.from_model(m) for m in messages]


async def get_message(
    message_id: DatabaseId,
    db: AsyncSession = Depends(get_db_session),
) -> Union[MessageResponse, Response]:
    message = await message_service.get_message_by_id(db, message_id)
    if message is None:
        return _empty_ok()
    return MessageResponse.from_model(message)


async def delete_message(
    message_id: DatabaseId,
    db: AsyncSession = Depends(get_db_session),
) -> Union[int, Response]:
    """
    Delete a message.

    The existence check comes first so the body can report 1 vs. empty.
    """
    if await message_service.get_message_by_id(db, message_id) is None:
        return _empty_ok()
    await message_service.delete_message(db, message_id)
    return 1


async def update_message(
    message_id: DatabaseId,
    body: MessageRequest,
    db: AsyncSession = Depends(get_db_session),
) -> int:
    updated = await message_service.update_message(db, message_id, body)
    if updated is None:
        raise ValidationError(
            message=(
                f"Message {message_id} does not exist or messageText is not "
                f"1-{MESSAGE_TEXT_MAX_LENGTH} characters"
            ),
            field="messageText",
        )
    return 1


async def list_messages_by_account(
    account_id: DatabaseId,
    db: AsyncSession = Depends(get_db_session),
) -> List[MessageResponse]:
    messages = await message_service.get_messages_by_user(db, account_id)
    return [MessageResponse.from_model(m) for m in messages]


# ── Routing Table ─────────────────────────────────────────────────────────
ROUTES = [
    (
        "POST", "/messages", create_message,
        {
            "response_model": MessageResponse,
            "summary": "Create a message",
            "responses": {400: {"description": "Invalid text or unknown author", "model": ErrorResponse}},
        },
    ),
    (
        "GET", "/messages", list_messages,
        {"response_model": List[MessageResponse], "summary": "List all messages"},
    ),
    (
        "GET", "/messages/{message_id}", get_message,
        {
            "response_model": MessageResponse,
            "summary": "Get a message by id",
            "description": "Answers 200 with an empty body when the message does not exist.",
        },
    ),
    (
        "DELETE", "/messages/{message_id}", delete_message,
        {
            "response_model": int,
            "summary": "Delete a message by id",
            "description": "Body is 1 when a message was deleted, empty otherwise. Always 200.",
        },
    ),
    (
        "PATCH", "/messages/{message_id}", update_message,
        {
            "response_model": int,
            "summary": "Replace a message's text",
            "responses": {400: {"description": "Unknown id or invalid text", "model": ErrorResponse}},
        },
    ),
    (
        "GET", "/accounts/{account_id}/messages", list_messages_by_account,
        {"response_model": List[MessageResponse], "summary": "List messages posted by an account"},
    ),
]

for method, path, endpoint, options in ROUTES:
    router.add_api_route(path, endpoint, methods=[method], **options)
