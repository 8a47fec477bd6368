"""
NoteKeeper Backend: Account Schemas
====================================

Request bodies and response envelopes for /account, /login and /get-user.

Request fields are Optional so that a missing field reaches the service and
is reported as `MissingFieldError` ("<field> is required", 400) rather than
FastAPI's generic 422.

Responses never include the password hash.
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class AccountCreateRequest(BaseModel):
    username: Optional[str] = Field(default=None, description="Display name")
    password: Optional[str] = Field(default=None, description="Plaintext password")
    email: Optional[str] = Field(default=None, description="Unique login email")


class LoginRequest(BaseModel):
    email: Optional[str] = Field(default=None)
    password: Optional[str] = Field(default=None)


class AccountResponse(BaseModel):
    """Public view of an account."""

    id: uuid.UUID = Field(serialization_alias="_id", description="Account identifier")
    username: str
    email: str
    created_at: datetime = Field(serialization_alias="createdOn")

    model_config = {"from_attributes": True}

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)


class AuthResult(BaseModel):
    """Account plus freshly issued bearer token, returned by signup and login."""

    account: AccountResponse
    access_token: str


class AuthEnvelope(BaseModel):
    """
    Success envelope for POST /account and POST /login.

    Example:
        {
            "error": false,
            "data": {"_id": "...", "username": "ann", "email": "a@x.com", "createdOn": "..."},
            "accessToken": "eyJhbGciOi...",
            "message": "Login successful"
        }
    """

    error: bool = False
    data: AccountResponse
    access_token: str = Field(serialization_alias="accessToken")
    message: Optional[str] = None


class AccountEnvelope(BaseModel):
    error: bool = False
    data: AccountResponse
