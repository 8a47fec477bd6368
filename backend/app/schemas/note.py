"""
NoteKeeper Backend: Note Schemas
=================================

What:  Pydantic models defining the notes API contract.
How:   Responses use camel-cased wire names through serialization aliases
       (`_id`, `user`, `createdOn`) while Python code keeps snake_case.
       FastAPI serializes response models by alias.

Request bodies keep fields Optional; presence is checked by NoteService so
that a missing title/description yields "<field> is required" with 400.
"""

import uuid
from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class NoteWriteRequest(BaseModel):
    """Body for POST /notes and PUT /notes/{id}."""

    title: Optional[str] = Field(default=None, description="Note title (required, non-empty)")
    description: Optional[str] = Field(default=None, description="Note body (required, non-empty)")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """Full representation of a note as seen by its owner."""

    id: uuid.UUID = Field(serialization_alias="_id", description="Unique note identifier")
    title: str
    description: str
    owner_id: uuid.UUID = Field(serialization_alias="user", description="Owning account id")
    created_at: datetime = Field(serialization_alias="createdOn")
    pinned: bool

    model_config = {"from_attributes": True}

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        """Stored timestamps are UTC; SQLite returns them without tzinfo."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)


class NoteEnvelope(BaseModel):
    error: bool = False
    data: NoteResponse
    message: Optional[str] = None


class NoteListEnvelope(BaseModel):
    error: bool = False
    data: List[NoteResponse]
    message: Optional[str] = None
