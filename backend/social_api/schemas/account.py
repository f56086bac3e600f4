"""
Social Media API Backend: Account Schemas
===========================================

What:  API contract for POST /register and POST /login.

Request fields are all optional at the schema level. A missing or null
username/password must reach AccountService so it answers 400 through the
registration rules, rather than FastAPI's schema-level rejection.
"""

from typing import Optional

from pydantic import BaseModel, Field

from social_api.models.account import Account


class AccountRequest(BaseModel):
    """
    Body of POST /register and POST /login.

    Unknown keys (e.g. a client-sent "id") are ignored.
    """
    username: Optional[str] = Field(default=None, description="Login name")
    password: Optional[str] = Field(default=None, description="Plain password (min 4 chars on register)")


class AccountResponse(BaseModel):
    """Stored account as returned by register and login."""
    id: int = Field(description="Auto-assigned account id")
    username: str = Field(description="Login name")
    password: str = Field(description="Stored password")

    model_config = {"from_attributes": True}

    @classmethod
    def from_model(cls, account: Account) -> "AccountResponse":
        return cls(id=account.id, username=account.username, password=account.password)
