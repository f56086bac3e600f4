"""
Social Media API Backend: Message SQLAlchemy Model
====================================================

What:  ORM model representing the `message` table.
Who:   Used by MessageRepository for CRUD and by Alembic for schema management.

Table Design:
    - id: auto-increment integer primary key
    - posted_by: author's account id; indexed for GET /accounts/{id}/messages
    - message_text: VARCHAR(255), the same limit the service enforces
    - posted_at: epoch milliseconds (BIGINT), supplied by the client or
      stamped at creation
"""

import time

from sqlalchemy import BigInteger, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from social_api.database import Base


def current_epoch_millis() -> int:
    """Current UTC time as integer epoch milliseconds."""
    return int(time.time() * 1000)


class Message(Base):
    """
    A text post authored by one Account.

    Lifecycle:
        1. Created when text is valid and posted_by names an existing account
        2. message_text may be replaced via PATCH /messages/{id}
        3. Removed via DELETE /messages/{id}

    Query Patterns:
        - Get by id:       primary key lookup
        - List by author:  WHERE posted_by = :id → idx on posted_by
    """

    __tablename__ = "message"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Auto-assigned message identifier",
    )

    posted_by: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        index=True,
        comment="Id of the authoring account",
    )

    message_text: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Message body, 1-255 characters",
    )

    posted_at: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
        default=current_epoch_millis,
        comment="Posting time in epoch milliseconds",
    )

    def __repr__(self) -> str:
        return f"<Message(id={self.id}, posted_by={self.posted_by}, posted_at={self.posted_at})>"
