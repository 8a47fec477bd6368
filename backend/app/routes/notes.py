"""
NoteKeeper Backend: Notes Route Handlers
=========================================

What:  Owner-scoped note CRUD, pin/unpin and search under /notes.
How:   Every handler depends on `get_current_account_id`; the resolved id is
       the only owner passed to NoteService. Handlers stay thin: parse the
       request, call the service, wrap the result in the success envelope.

Route order matters: /notes/search is declared before /notes/{note_id}.
"""

import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.common import ErrorResponse, MessageEnvelope
from app.schemas.note import NoteEnvelope, NoteListEnvelope, NoteWriteRequest
from app.security.auth_gate import get_current_account_id
from app.services.note_service import note_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notes", tags=["Notes"])

_UNAUTHORIZED = {401: {"description": "Missing or invalid bearer token", "model": ErrorResponse}}
_NOT_FOUND = {404: {"description": "Note not found", "model": ErrorResponse}}
_BAD_REQUEST = {400: {"description": "Invalid input", "model": ErrorResponse}}


@router.post(
    "",
    response_model=NoteEnvelope,
    response_model_exclude_none=True,
    responses={**_BAD_REQUEST, **_UNAUTHORIZED},
    summary="Create a note",
)
async def create_note(
    payload: Optional[NoteWriteRequest] = None,
    account_id: UUID = Depends(get_current_account_id),
    db: AsyncSession = Depends(get_db_session),
) -> NoteEnvelope:
    if payload is None:
        payload = NoteWriteRequest()
    note = await note_service.create_note(
        db, owner_id=account_id, title=payload.title, description=payload.description
    )
    return NoteEnvelope(data=note, message="Note created")


@router.get(
    "",
    response_model=NoteListEnvelope,
    response_model_exclude_none=True,
    responses=_UNAUTHORIZED,
    summary="List the caller's notes",
)
async def list_notes(
    account_id: UUID = Depends(get_current_account_id),
    db: AsyncSession = Depends(get_db_session),
) -> NoteListEnvelope:
    notes = await note_service.list_notes(db, owner_id=account_id)
    return NoteListEnvelope(data=notes)


@router.get(
    "/search",
    response_model=NoteListEnvelope,
    response_model_exclude_none=True,
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_UNAUTHORIZED},
    summary="Search the caller's notes",
)
async def search_notes(
    query: Optional[str] = Query(default=None, description="Words to look for in title or description"),
    account_id: UUID = Depends(get_current_account_id),
    db: AsyncSession = Depends(get_db_session),
) -> NoteListEnvelope:
    notes = await note_service.search_notes(db, owner_id=account_id, query=query)
    return NoteListEnvelope(data=notes)


@router.put(
    "/pin/{note_id}",
    response_model=NoteEnvelope,
    response_model_exclude_none=True,
    responses={**_NOT_FOUND, **_UNAUTHORIZED},
    summary="Pin a note",
)
async def pin_note(
    note_id: str,
    account_id: UUID = Depends(get_current_account_id),
    db: AsyncSession = Depends(get_db_session),
) -> NoteEnvelope:
    note = await note_service.set_pinned(db, owner_id=account_id, note_id=note_id, pinned=True)
    return NoteEnvelope(data=note, message="Note pinned")


@router.put(
    "/unpin/{note_id}",
    response_model=NoteEnvelope,
    response_model_exclude_none=True,
    responses={**_NOT_FOUND, **_UNAUTHORIZED},
    summary="Unpin a note",
)
async def unpin_note(
    note_id: str,
    account_id: UUID = Depends(get_current_account_id),
    db: AsyncSession = Depends(get_db_session),
) -> NoteEnvelope:
    note = await note_service.set_pinned(db, owner_id=account_id, note_id=note_id, pinned=False)
    return NoteEnvelope(data=note, message="Note unpinned")


@router.put(
    "/{note_id}",
    response_model=NoteEnvelope,
    response_model_exclude_none=True,
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_UNAUTHORIZED},
    summary="Update a note's title and description",
)
async def update_note(
    note_id: str,
    payload: Optional[NoteWriteRequest] = None,
    account_id: UUID = Depends(get_current_account_id),
    db: AsyncSession = Depends(get_db_session),
) -> NoteEnvelope:
    if payload is None:
        payload = NoteWriteRequest()
    note = await note_service.update_note(
        db,
        owner_id=account_id,
        note_id=note_id,
        title=payload.title,
        description=payload.description,
    )
    return NoteEnvelope(data=note, message="Note updated")


@router.delete(
    "/{note_id}",
    response_model=MessageEnvelope,
    responses={**_NOT_FOUND, **_UNAUTHORIZED},
    summary="Delete a note permanently",
)
async def delete_note(
    note_id: str,
    account_id: UUID = Depends(get_current_account_id),
    db: AsyncSession = Depends(get_db_session),
) -> MessageEnvelope:
    await note_service.delete_note(db, owner_id=account_id, note_id=note_id)
    return MessageEnvelope(message="Note deleted")
