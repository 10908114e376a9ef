"""
Notekeep Backend — Repository Unit Tests
==========================================

What:  NoteRepository and UserRepository outcomes without the HTTP layer.
How:   Real AsyncSession on the SQLite test database; the mock session
       fixture covers the database-failure paths.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from helpers import notes_in_db, users_in_db
from notekeep.exceptions import (
    DatabaseError,
    ErrorKind,
    MalformedIdentifierError,
    UniquenessViolationError,
    ValidationError,
)
from notekeep.repositories.note_repository import NoteRepository
from notekeep.repositories.user_repository import UserRepository


class TestNoteRepositoryCreate:
    """create()"""

    def setup_method(self):
        self.repo = NoteRepository()

    @pytest.mark.asyncio
    async def test_create_then_find_by_id_round_trips(self, db_session):
        created = await self.repo.create(db_session, content="Remember the milk", important=True)
        await db_session.commit()

        found = await self.repo.find_by_id(db_session, created.id)

        assert found is not None
        assert (found.id, found.content, found.important) == (created.id, "Remember the milk", True)

    @pytest.mark.asyncio
    async def test_important_none_is_stored_as_false(self, db_session):
        note = await self.repo.create(db_session, content="x", important=None)

        assert note.important is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", [None, "", "   "])
    async def test_missing_content_raises_and_writes_nothing(self, db_session, content):
        with pytest.raises(ValidationError) as exc_info:
            await self.repo.create(db_session, content=content)
        await db_session.commit()

        assert exc_info.value.kind is ErrorKind.VALIDATION
        assert exc_info.value.message == (
            "Note validation failed: content: Path `content` is required."
        )
        assert await notes_in_db() == []


class TestNoteRepositoryLookup:
    """find_all(), find_by_id()"""

    def setup_method(self):
        self.repo = NoteRepository()

    @pytest.mark.asyncio
    async def test_find_all_returns_every_note(self, db_session, seeded_notes):
        notes = await self.repo.find_all(db_session)

        assert sorted(n.id for n in notes) == sorted(seeded_notes)

    @pytest.mark.asyncio
    async def test_find_by_id_absent_returns_none(self, db_session):
        assert await self.repo.find_by_id(db_session, "0" * 24) is None

    @pytest.mark.asyncio
    async def test_find_by_id_malformed_raises(self, db_session):
        with pytest.raises(MalformedIdentifierError) as exc_info:
            await self.repo.find_by_id(db_session, "5a3d5da59070081a82a3445")

        assert exc_info.value.message == "malformatted id"
        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_find_all_wraps_database_failure(self, mock_db_session):
        mock_db_session.execute.side_effect = OperationalError("SELECT", {}, Exception("gone"))

        with pytest.raises(DatabaseError) as exc_info:
            await self.repo.find_all(mock_db_session)

        assert exc_info.value.status_code == 500
        assert exc_info.value.context["error_type"] == "OperationalError"


class TestNoteRepositoryMutations:
    """update_by_id(), delete_by_id()"""

    def setup_method(self):
        self.repo = NoteRepository()

    @pytest.mark.asyncio
    async def test_update_replaces_fields_and_keeps_id(self, db_session, seeded_notes):
        note_id = seeded_notes[0]

        updated = await self.repo.update_by_id(db_session, note_id, "CSS is hard", False)

        assert updated.id == note_id
        assert (updated.content, updated.important) == ("CSS is hard", False)

    @pytest.mark.asyncio
    async def test_update_absent_returns_none(self, db_session, seeded_notes):
        assert await self.repo.update_by_id(db_session, "f" * 24, "new", True) is None

    @pytest.mark.asyncio
    async def test_update_rejects_empty_content(self, db_session, seeded_notes):
        with pytest.raises(ValidationError):
            await self.repo.update_by_id(db_session, seeded_notes[0], "", True)

    @pytest.mark.asyncio
    async def test_delete_twice_removes_one_record(self, db_session, seeded_notes):
        await self.repo.delete_by_id(db_session, seeded_notes[0])
        await self.repo.delete_by_id(db_session, seeded_notes[0])
        await db_session.commit()

        assert len(await notes_in_db()) == len(seeded_notes) - 1

    @pytest.mark.asyncio
    async def test_delete_malformed_raises(self, db_session):
        with pytest.raises(MalformedIdentifierError):
            await self.repo.delete_by_id(db_session, "xyz")


class TestUserRepository:
    """UserRepository.create() and lookups"""

    def setup_method(self):
        self.repo = UserRepository()

    @pytest.mark.asyncio
    async def test_create_and_find_by_username(self, db_session):
        user = await self.repo.create(db_session, "alice", "pbkdf2_sha256$1000$c2FsdA==$aGFzaA==", "Alice")
        await db_session.commit()

        found = await self.repo.find_by_username(db_session, "alice")

        assert found.id == user.id
        assert found.name == "Alice"

    @pytest.mark.asyncio
    async def test_duplicate_username_raises_uniqueness_violation(self, db_session, root_user):
        users_at_start = await users_in_db()

        with pytest.raises(UniquenessViolationError) as exc_info:
            await self.repo.create(db_session, "root", "hash")
        await db_session.rollback()

        assert exc_info.value.kind is ErrorKind.UNIQUE_VIOLATION
        assert "expected `username` to be unique" in exc_info.value.message
        assert await users_in_db() == users_at_start

    @pytest.mark.asyncio
    async def test_unique_index_catches_duplicate_missed_by_lookup(
        self, db_session, root_user, monkeypatch
    ):
        users_at_start = await users_in_db()
        monkeypatch.setattr(self.repo, "find_by_username", AsyncMock(return_value=None))

        with pytest.raises(UniquenessViolationError) as exc_info:
            await self.repo.create(db_session, "root", "hash")
        await db_session.rollback()

        assert exc_info.value.status_code == 400
        assert "expected `username` to be unique. Value: `root`" in exc_info.value.message
        assert await users_in_db() == users_at_start

    @pytest.mark.asyncio
    async def test_lookups_wrap_database_failure(self, mock_db_session):
        mock_db_session.execute.side_effect = OperationalError("SELECT", {}, Exception("gone"))

        with pytest.raises(DatabaseError):
            await self.repo.find_by_username(mock_db_session, "root")
        with pytest.raises(DatabaseError) as exc_info:
            await self.repo.find_by_id(mock_db_session, "5a3d5da59070081a82a3445b")

        assert exc_info.value.context["error_type"] == "OperationalError"

    @pytest.mark.asyncio
    async def test_create_commits_before_returning(self, mock_db_session):
        mock_db_session.execute.return_value = MagicMock(
            scalar_one_or_none=MagicMock(return_value=None)
        )

        await self.repo.create(mock_db_session, "alice", "hash")

        mock_db_session.flush.assert_awaited_once()
        mock_db_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_missing_username_raises_validation_error(self, db_session):
        with pytest.raises(ValidationError) as exc_info:
            await self.repo.create(db_session, None, "hash")

        assert exc_info.value.field == "username"

    @pytest.mark.asyncio
    async def test_find_by_id_loads_notes(self, db_session, root_user):
        user = await self.repo.find_by_id(db_session, root_user)

        assert user.username == "root"
        assert user.notes == []
