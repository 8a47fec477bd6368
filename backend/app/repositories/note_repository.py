"""
NoteKeeper Backend: Note Repository
====================================

What:  Persistence for notes, with every statement scoped by owner.
How:   Each public method takes `owner_id` and adds `Note.owner_id == owner_id`
       to its WHERE clause. A note id that exists but belongs to someone else
       behaves exactly like an id that does not exist: lookups return None,
       deletes return False.

Query patterns:
    List:    SELECT ... WHERE owner_id = :owner ORDER BY created_at
    Scoped:  SELECT ... WHERE id = :id AND owner_id = :owner
    Search:  SELECT ... WHERE owner_id = :owner
               AND (title ILIKE :t1 OR description ILIKE :t1 OR ...)

`owner_id` is written once in `create()`; no method here assigns it again.
"""

import logging
from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy import asc, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.note import Note

logger = logging.getLogger(__name__)

# Escape character for LIKE patterns built from user input
_LIKE_ESCAPE = "\\"


def _like_pattern(term: str) -> str:
    """Wraps a search term in % wildcards, escaping LIKE metacharacters."""
    escaped = (
        term.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


class NoteRepository:
    """Owner-scoped CRUD and search over the `notes` table."""

    async def create(
        self,
        db: AsyncSession,
        owner_id: UUID,
        title: str,
        description: str,
    ) -> Note:
        note = Note(owner_id=owner_id, title=title, description=description, pinned=False)
        db.add(note)
        await db.flush()
        return note

    async def list_for_owner(self, db: AsyncSession, owner_id: UUID) -> List[Note]:
        result = await db.execute(
            select(Note)
            .where(Note.owner_id == owner_id)
            .order_by(asc(Note.created_at))
        )
        return list(result.scalars().all())

    async def get_owned(
        self,
        db: AsyncSession,
        owner_id: UUID,
        note_id: UUID,
    ) -> Optional[Note]:
        result = await db.execute(
            select(Note).where(Note.id == note_id, Note.owner_id == owner_id)
        )
        return result.scalar_one_or_none()

    async def update_content(
        self,
        db: AsyncSession,
        owner_id: UUID,
        note_id: UUID,
        title: str,
        description: str,
    ) -> Optional[Note]:
        """Replaces title and description; returns None if the caller does not own the note."""
        note = await self.get_owned(db, owner_id, note_id)
        if note is None:
            return None
        note.title = title
        note.description = description
        await db.flush()
        return note

    async def set_pinned(
        self,
        db: AsyncSession,
        owner_id: UUID,
        note_id: UUID,
        pinned: bool,
    ) -> Optional[Note]:
        note = await self.get_owned(db, owner_id, note_id)
        if note is None:
            return None
        note.pinned = pinned
        await db.flush()
        return note

    async def delete_owned(self, db: AsyncSession, owner_id: UUID, note_id: UUID) -> bool:
        """Permanently removes the note. Returns False when nothing matched."""
        note = await self.get_owned(db, owner_id, note_id)
        if note is None:
            return False
        await db.delete(note)
        await db.flush()
        return True

    async def search(
        self,
        db: AsyncSession,
        owner_id: UUID,
        terms: Sequence[str],
    ) -> List[Note]:
        """
        Case-insensitive match of any term against title or description.

        Args:
            terms: Non-empty list of search words; callers split and strip them.
        """
        conditions = []
        for term in terms:
            pattern = _like_pattern(term)
            conditions.append(Note.title.ilike(pattern, escape=_LIKE_ESCAPE))
            conditions.append(Note.description.ilike(pattern, escape=_LIKE_ESCAPE))

        result = await db.execute(
            select(Note)
            .where(Note.owner_id == owner_id, or_(*conditions))
            .order_by(asc(Note.created_at))
        )
        return list(result.scalars().all())


note_repository = NoteRepository()
