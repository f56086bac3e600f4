"""
Social Media API Backend: Account SQLAlchemy Model
====================================================

What:  ORM model representing the `account` table.
Who:   Used by AccountRepository for CRUD and by Alembic for schema management.
When:  Instantiated on registration; read on login and on message creation
       (postedBy existence check).

Table Design:
    - id: auto-increment integer, assigned by the database on insert
    - username: unique index, also serves the login lookup
    - password: stored as supplied (hashing is out of scope for this service)
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from social_api.database import Base


class Account(Base):
    """
    A registered user identity.

    Lifecycle:
        1. Created when registration passes validation
        2. Read on login and whenever a message names it as postedBy
        3. Never updated or deleted by this service
    """

    __tablename__ = "account"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Auto-assigned account identifier",
    )

    # Uniqueness is also checked in AccountService.register; the index is the
    # guard when two registrations for the same name race.
    username: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="Login name, unique across all accounts",
    )

    password: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Account password (at least 4 characters)",
    )

    def __repr__(self) -> str:
        """Developer-friendly representation; never includes the password."""
        return f"<Account(id={self.id}, username='{self.username}')>"
