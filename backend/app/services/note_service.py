"""
NoteKeeper Backend: Note Service
=================================

What:  Business rules for the owner's notes: create, list, update, delete,
       pin/unpin, search.
How:   Every method takes the `owner_id` resolved by the auth gate and passes
       it to NoteRepository, which filters every statement by owner.
Who:   Called by the notes route handlers.

Ownership:
    - create() stamps owner_id from the authenticated account
    - update/pin/unpin/delete match on (note id, owner_id); a miss is
      NotFoundError whether the note is absent or owned by someone else
    - note ids that are not valid UUIDs are treated as misses too
    - no method accepts an owner_id from the request body

Search policy:
    An empty result is NotFoundError ("No notes found") while
    `search_empty_is_not_found` is on, otherwise an empty list.
"""

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.exceptions import DatabaseError, InvalidQueryError, NotFoundError
from app.repositories.note_repository import note_repository
from app.schemas.note import NoteResponse
from app.services.validation import require_field

logger = logging.getLogger(__name__)


def _parse_note_id(note_id: str) -> UUID:
    try:
        return UUID(str(note_id))
    except ValueError:
        raise NotFoundError(resource="note", context={"note_id": note_id})


def _storage_error(action: str, exc: Exception) -> DatabaseError:
    logger.error("Database error %s: %s", action, str(exc), exc_info=True)
    return DatabaseError(context={"original_error": str(exc)})


class NoteService:
    """
    Owner-scoped note operations.

    Error Handling Strategy:
        Validation and ownership failures raise application exceptions before
        or after the repository call. Unexpected storage exceptions are
        wrapped in DatabaseError.
    """

    def __init__(self, search_empty_is_not_found: Optional[bool] = None):
        if search_empty_is_not_found is None:
            search_empty_is_not_found = settings.search_empty_is_not_found
        self.search_empty_is_not_found = search_empty_is_not_found

    async def create_note(
        self,
        db: AsyncSession,
        owner_id: UUID,
        title: Optional[str],
        description: Optional[str],
    ) -> NoteResponse:
        """
        Persist a new unpinned note owned by `owner_id`.

        Raises:
            MissingFieldError: title or description absent or blank
            DatabaseError: storage failure
        """
        title = require_field(title, "title")
        description = require_field(description, "description")

        try:
            note = await note_repository.create(db, owner_id=owner_id, title=title, description=description)
        except Exception as e:
            raise _storage_error("creating note", e) from e

        logger.info("Note %s created for account %s", note.id, owner_id)
        return NoteResponse.model_validate(note)

    async def list_notes(self, db: AsyncSession, owner_id: UUID) -> List[NoteResponse]:
        try:
            notes = await note_repository.list_for_owner(db, owner_id)
        except Exception as e:
            raise _storage_error("listing notes", e) from e
        return [NoteResponse.model_validate(n) for n in notes]

    async def update_note(
        self,
        db: AsyncSession,
        owner_id: UUID,
        note_id: str,
        title: Optional[str],
        description: Optional[str],
    ) -> NoteResponse:
        """
        Replace the title and description of one of the caller's notes.

        Only title and description change; owner, pinned flag and creation
        time are left as they are.

        Raises:
            MissingFieldError, NotFoundError, DatabaseError
        """
        title = require_field(title, "title")
        description = require_field(description, "description")
        nid = _parse_note_id(note_id)

        try:
            note = await note_repository.update_content(
                db, owner_id=owner_id, note_id=nid, title=title, description=description
            )
        except Exception as e:
            raise _storage_error("updating note", e) from e

        if note is None:
            raise NotFoundError(resource="note", context={"note_id": str(nid)})
        return NoteResponse.model_validate(note)

    async def delete_note(self, db: AsyncSession, owner_id: UUID, note_id: str) -> None:
        nid = _parse_note_id(note_id)
        try:
            deleted = await note_repository.delete_owned(db, owner_id=owner_id, note_id=nid)
        except Exception as e:
            raise _storage_error("deleting note", e) from e

        if not deleted:
            raise NotFoundError(resource="note", context={"note_id": str(nid)})
        logger.info("Note %s deleted by account %s", nid, owner_id)

    async def set_pinned(
        self,
        db: AsyncSession,
        owner_id: UUID,
        note_id: str,
        pinned: bool = True,
    ) -> NoteResponse:
        """Pin (or with pinned=False, unpin) one of the caller's notes."""
        nid = _parse_note_id(note_id)
        try:
            note = await note_repository.set_pinned(db, owner_id=owner_id, note_id=nid, pinned=pinned)
        except Exception as e:
            raise _storage_error("pinning note", e) from e

        if note is None:
            raise NotFoundError(resource="note", context={"note_id": str(nid)})
        return NoteResponse.model_validate(note)

    async def search_notes(
        self,
        db: AsyncSession,
        owner_id: UUID,
        query: Optional[str],
    ) -> List[NoteResponse]:
        """
        Case-insensitive search across the caller's note titles and descriptions.

        The query is split on whitespace; a note matches if any word occurs
        in its title or description.

        Raises:
            InvalidQueryError: query missing or blank
            NotFoundError: nothing matched (while the policy flag is on)
            DatabaseError: storage failure
        """
        if not isinstance(query, str) or not query.strip():
            raise InvalidQueryError()

        terms = query.split()
        try:
            notes = await note_repository.search(db, owner_id=owner_id, terms=terms)
        except Exception as e:
            raise _storage_error("searching notes", e) from e

        if not notes and self.search_empty_is_not_found:
            raise NotFoundError(resource="note", message="No notes found", context={"query": query})
        return [NoteResponse.model_validate(n) for n in notes]


# ── Singleton Instance ────────────────────────────────────────────────────
note_service = NoteService()
