"""Create account and message tables

Revision ID: 001
Revises: None
Create Date: 2026-10-18 00:00:00.000000+00:00

What:  Creates `account` (unique username) and `message` (indexed posted_by).
Rollback: downgrade() drops both tables (destructive).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create both tables with their indexes. See social_api/models for column docs."""
    op.create_table(
        "account",
        sa.Column(
            "id",
            sa.Integer(),
            autoincrement=True,
            nullable=False,
            comment="Auto-assigned account identifier",
        ),
        sa.Column(
            "username",
            sa.String(255),
            nullable=False,
            comment="Login name, unique across all accounts",
        ),
        sa.Column(
            "password",
            sa.String(255),
            nullable=False,
            comment="Account password (at least 4 characters)",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_account_username", "account", ["username"], unique=True)

    op.create_table(
        "message",
        sa.Column(
            "id",
            sa.Integer(),
            autoincrement=True,
            nullable=False,
            comment="Auto-assigned message identifier",
        ),
        # No FOREIGN KEY: posted_by is checked against account.id only on create
        sa.Column(
            "posted_by",
            sa.Integer(),
            nullable=False,
            comment="Id of the authoring account",
        ),
        sa.Column(
            "message_text",
            sa.String(255),
            nullable=False,
            comment="Message body, 1-255 characters",
        ),
        sa.Column(
            "posted_at",
            sa.BigInteger(),
            nullable=False,
            comment="Posting time in epoch milliseconds",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_message_posted_by", "message", ["posted_by"])


def downgrade() -> None:
    """Drop both tables. All accounts and messages are lost."""
    op.drop_index("ix_message_posted_by", table_name="message")
    op.drop_table("message")
    op.drop_index("ix_account_username", table_name="account")
    op.drop_table("account")
