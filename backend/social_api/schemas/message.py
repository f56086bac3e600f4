"""
Social Media API Backend: Message Schemas
===========================================

What:  API contract for the /messages endpoints and
       GET /accounts/{accountId}/messages.

Wire format (camelCase):
    {
        "id": 1,
        "postedBy": 1,
        "messageText": "hello",
        "postedAt": 1669947792000
    }
"""

from typing import Optional

from pydantic import BaseModel, Field

from social_api.models.message import Message
from social_api.schemas.common import INT32_MAX, INT32_MIN, INT64_MAX, INT64_MIN


class MessageRequest(BaseModel):
    """
    Body of POST /messages and PATCH /messages/{messageId}.

    PATCH only reads messageText; postedBy and postedAt are ignored there.
    Text rules (non-blank, ≤255 chars) live in MessageService so violations
    answer 400, not 422.
    """
    posted_by: Optional[int] = Field(
        default=None,
        alias="postedBy",
        ge=INT32_MIN,
        le=INT32_MAX,
        description="Author account id",
    )
    message_text: Optional[str] = Field(default=None, alias="messageText", description="Message body")
    posted_at: Optional[int] = Field(
        default=None,
        alias="postedAt",
        ge=INT64_MIN,
        le=INT64_MAX,
        description="Epoch milliseconds; stamped by the server when omitted",
    )

    model_config = {"populate_by_name": True}


class MessageResponse(BaseModel):
    """Stored message."""
    id: int = Field(description="Auto-assigned message id")
    posted_by: int = Field(alias="postedBy", description="Author account id")
    message_text: str = Field(alias="messageText", description="Message body")
    posted_at: int = Field(alias="postedAt", description="Epoch milliseconds")

    model_config = {"populate_by_name": True, "from_attributes": True}

    @classmethod
    def from_model(cls, message: Message) -> "MessageResponse":
        return cls(
            id=message.id,
            posted_by=message.posted_by,
            message_text=message.message_text,
            posted_at=message.posted_at,
        )
