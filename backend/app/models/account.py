"""
NoteKeeper Backend: Account SQLAlchemy Model
=============================================

What:  ORM model for the `accounts` table (the credential store).
Who:   Read and written only through AccountRepository.

Table Design:
    - UUID primary key: non-sequential, cannot be enumerated
    - email: unique index; also checked before insert so the common case
      fails with a readable message instead of an IntegrityError
    - password_hash: bcrypt hash string, never the plaintext
    - created_at: UTC, set on insert
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, String, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Account(Base):
    """
    A registered user.

    Lifecycle:
        Created once by account creation; read on login and by /get-user.
        Never deleted by this service.
    """

    __tablename__ = "accounts"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    username: Mapped[str] = mapped_column(String(255), nullable=False)

    email: Mapped[str] = mapped_column(
        String(320),
        nullable=False,
        unique=True,
        index=True,
    )

    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    def __repr__(self) -> str:
        # no password_hash in debug output
        return f"<Account(id={self.id}, email='{self.email}')>"
