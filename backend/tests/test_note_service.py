"""
NoteKeeper Backend: Note Service Unit Tests
============================================

What:  Tests for NoteService business logic (create, update, delete, pin, search).
How:   Uses mock DB sessions and a patched repository (no real DB).

What we test:
    ✅ Presence checks for title and description
    ✅ New notes are stamped with the caller's id and start unpinned
    ✅ Misses and malformed ids raise NotFoundError
    ✅ Pin and unpin pass the right flag through
    ✅ Search query validation and the empty-result policy
    ✅ Storage failures become DatabaseError
"""

from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock, patch
from uuid import uuid4

import pytest

from app.exceptions import DatabaseError, InvalidQueryError, MissingFieldError, NotFoundError
from app.services.note_service import NoteService


def _note(owner_id, title="Groceries", description="milk, eggs", pinned=False):
    return SimpleNamespace(
        id=uuid4(),
        title=title,
        description=description,
        owner_id=owner_id,
        created_at=datetime.now(timezone.utc),
        pinned=pinned,
    )


class TestCreateNote:

    def setup_method(self):
        self.service = NoteService()
        self.owner_id = uuid4()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "title,description,missing",
        [
            (None, "body", "title"),
            ("", "body", "title"),
            ("   ", "body", "title"),
            ("t", None, "description"),
            ("t", "", "description"),
        ],
    )
    async def test_missing_fields(self, mock_db_session, title, description, missing):
        with patch("app.services.note_service.note_repository") as repo:
            with pytest.raises(MissingFieldError) as excinfo:
                await self.service.create_note(
                    mock_db_session, owner_id=self.owner_id, title=title, description=description
                )
            repo.create.assert_not_called()
        assert excinfo.value.message == f"{missing} is required"

    @pytest.mark.asyncio
    async def test_create_success(self, mock_db_session):
        with patch("app.services.note_service.note_repository") as repo:
            repo.create = AsyncMock(return_value=_note(self.owner_id, title="t", description="d"))

            result = await self.service.create_note(
                mock_db_session, owner_id=self.owner_id, title="t", description="d"
            )

            repo.create.assert_awaited_once_with(
                mock_db_session, owner_id=self.owner_id, title="t", description="d"
            )
        assert result.owner_id == self.owner_id
        assert result.pinned is False
        assert result.title == "t"

    @pytest.mark.asyncio
    async def test_storage_failure(self, mock_db_session):
        with patch("app.services.note_service.note_repository") as repo:
            repo.create = AsyncMock(side_effect=RuntimeError("disk full"))

            with pytest.raises(DatabaseError) as excinfo:
                await self.service.create_note(
                    mock_db_session, owner_id=self.owner_id, title="t", description="d"
                )
        assert excinfo.value.context["original_error"] == "disk full"
        assert excinfo.value.status_code == 500


class TestUpdateAndDelete:

    def setup_method(self):
        self.service = NoteService()
        self.owner_id = uuid4()

    @pytest.mark.asyncio
    async def test_update_not_owned_is_not_found(self, mock_db_session):
        with patch("app.services.note_service.note_repository") as repo:
            repo.update_content = AsyncMock(return_value=None)

            with pytest.raises(NotFoundError) as excinfo:
                await self.service.update_note(
                    mock_db_session, owner_id=self.owner_id, note_id=str(uuid4()), title="t", description="d"
                )
        assert excinfo.value.status_code == 404

    @pytest.mark.asyncio
    async def test_update_requires_title(self, mock_db_session):
        with patch("app.services.note_service.note_repository") as repo:
            with pytest.raises(MissingFieldError, match="title is required"):
                await self.service.update_note(
                    mock_db_session, owner_id=self.owner_id, note_id=str(uuid4()), title=None, description="d"
                )
            repo.update_content.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_success(self, mock_db_session):
        note = _note(self.owner_id, title="new", description="body", pinned=True)
        with patch("app.services.note_service.note_repository") as repo:
            repo.update_content = AsyncMock(return_value=note)

            result = await self.service.update_note(
                mock_db_session, owner_id=self.owner_id, note_id=str(note.id), title="new", description="body"
            )

            kwargs = repo.update_content.await_args.kwargs
        assert kwargs["note_id"] == note.id
        assert kwargs["owner_id"] == self.owner_id
        assert result.title == "new"
        assert result.pinned is True

    @pytest.mark.asyncio
    @pytest.mark.parametrize("bad_id", ["abc", "123", "not-a-uuid"])
    async def test_malformed_id_is_not_found(self, mock_db_session, bad_id):
        with patch("app.services.note_service.note_repository") as repo:
            with pytest.raises(NotFoundError):
                await self.service.delete_note(mock_db_session, owner_id=self.owner_id, note_id=bad_id)
            repo.delete_owned.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete_miss_is_not_found(self, mock_db_session):
        with patch("app.services.note_service.note_repository") as repo:
            repo.delete_owned = AsyncMock(return_value=False)
            with pytest.raises(NotFoundError):
                await self.service.delete_note(mock_db_session, owner_id=self.owner_id, note_id=str(uuid4()))

    @pytest.mark.asyncio
    async def test_delete_success(self, mock_db_session):
        note_id = uuid4()
        with patch("app.services.note_service.note_repository") as repo:
            repo.delete_owned = AsyncMock(return_value=True)
            await self.service.delete_note(mock_db_session, owner_id=self.owner_id, note_id=str(note_id))
            repo.delete_owned.assert_awaited_once_with(
                mock_db_session, owner_id=self.owner_id, note_id=note_id
            )


class TestPin:

    def setup_method(self):
        self.service = NoteService()
        self.owner_id = uuid4()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("pinned", [True, False])
    async def test_flag_passed_through(self, mock_db_session, pinned):
        note = _note(self.owner_id, pinned=pinned)
        with patch("app.services.note_service.note_repository") as repo:
            repo.set_pinned = AsyncMock(return_value=note)

            result = await self.service.set_pinned(
                mock_db_session, owner_id=self.owner_id, note_id=str(note.id), pinned=pinned
            )

            assert repo.set_pinned.await_args.kwargs["pinned"] is pinned
        assert result.pinned is pinned

    @pytest.mark.asyncio
    async def test_pin_defaults_to_true(self, mock_db_session):
        note = _note(self.owner_id, pinned=True)
        with patch("app.services.note_service.note_repository") as repo:
            repo.set_pinned = AsyncMock(return_value=note)
            await self.service.set_pinned(mock_db_session, owner_id=self.owner_id, note_id=str(note.id))
            assert repo.set_pinned.await_args.kwargs["pinned"] is True

    @pytest.mark.asyncio
    async def test_pin_miss_is_not_found(self, mock_db_session):
        with patch("app.services.note_service.note_repository") as repo:
            repo.set_pinned = AsyncMock(return_value=None)
            with pytest.raises(NotFoundError):
                await self.service.set_pinned(mock_db_session, owner_id=self.owner_id, note_id=str(uuid4()))


class TestSearch:

    def setup_method(self):
        self.owner_id = uuid4()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("query", [None, "", "   "])
    async def test_blank_query_rejected(self, mock_db_session, query):
        with patch("app.services.note_service.note_repository") as repo:
            with pytest.raises(InvalidQueryError) as excinfo:
                await NoteService().search_notes(mock_db_session, owner_id=self.owner_id, query=query)
            repo.search.assert_not_called()
        assert excinfo.value.message == "Invalid search query"
        assert excinfo.value.status_code == 400

    @pytest.mark.asyncio
    async def test_query_split_into_terms(self, mock_db_session):
        with patch("app.services.note_service.note_repository") as repo:
            repo.search = AsyncMock(return_value=[_note(self.owner_id)])

            result = await NoteService().search_notes(
                mock_db_session, owner_id=self.owner_id, query="  milk   bread "
            )

            assert repo.search.await_args.kwargs["terms"] == ["milk", "bread"]
            assert repo.search.await_args.kwargs["owner_id"] == self.owner_id
        assert len(result) == 1

    @pytest.mark.asyncio
    async def test_empty_result_is_not_found(self, mock_db_session):
        with patch("app.services.note_service.note_repository") as repo:
            repo.search = AsyncMock(return_value=[])
            with pytest.raises(NotFoundError) as excinfo:
                await NoteService(search_empty_is_not_found=True).search_notes(
                    mock_db_session, owner_id=self.owner_id, query="zzz"
                )
        assert excinfo.value.message == "No notes found"

    @pytest.mark.asyncio
    async def test_empty_result_as_list_when_policy_off(self, mock_db_session):
        with patch("app.services.note_service.note_repository") as repo:
            repo.search = AsyncMock(return_value=[])
            result = await NoteService(search_empty_is_not_found=False).search_notes(
                mock_db_session, owner_id=self.owner_id, query="zzz"
            )
        assert result == []

    @pytest.mark.asyncio
    async def test_storage_failure(self, mock_db_session):
        with patch("app.services.note_service.note_repository") as repo:
            repo.search = AsyncMock(side_effect=RuntimeError("boom"))
            with pytest.raises(DatabaseError):
                await NoteService().search_notes(mock_db_session, owner_id=self.owner_id, query="x")
