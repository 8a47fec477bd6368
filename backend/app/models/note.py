"""
NoteKeeper Backend: Note SQLAlchemy Model
==========================================

What:  ORM model representing the `notes` table.
Who:   Read and written only through NoteRepository, which scopes every
       statement by `owner_id`.

Table Design:
    - UUID primary key
    - owner_id: FK to accounts.id, NOT NULL, indexed. Assigned at creation
      from the authenticated account and never updated afterwards.
    - title / description: required text
    - pinned: defaults to false
    - created_at: UTC, set on insert

Index on owner_id:
    Every query filters by owner, so listing and searching one account's
    notes never scans other accounts' rows.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, String, Text, Uuid, false, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Note(Base):
    """
    A note owned by exactly one account.

    Lifecycle:
        1. Created by its owner (pinned = False)
        2. Title/description updated, pinned toggled, only by the owner
        3. Hard-deleted by the owner (no tombstone)
    """

    __tablename__ = "notes"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    title: Mapped[str] = mapped_column(String, nullable=False)

    description: Mapped[str] = mapped_column(Text, nullable=False)

    owner_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
    )

    pinned: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=false(),
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        Index("idx_notes_owner_id", "owner_id"),
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, owner_id={self.owner_id}, pinned={self.pinned})>"
