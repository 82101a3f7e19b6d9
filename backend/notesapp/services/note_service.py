"""
Notes Backend — Note Service (CRUD over the Note Store)
=========================================================

What:  Create, read, update and delete operations for notes.
Why:   Keeps persistence logic out of the route handlers so it can be
       exercised without HTTP.
Who:   Called by the route handlers in notesapp.routes.notes.

Unit of work:
    Every public method is one independent unit of work: it runs its
    statements and commits before returning. Nothing spans multiple
    records, and concurrent writes to the same id are left to the
    database (last writer wins).

Error translation:
    Missing rows           → NotFoundError        (404)
    Malformed ids          → NotFoundError        (404)
    Row gone at commit     → NotFoundError        (404)
    SQLAlchemy / OS errors → StoreUnavailableError (500)
"""

import logging
from typing import List, Union
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from notesapp.exceptions import NotFoundError, StoreUnavailableError
from notesapp.models.note import Note
from notesapp.schemas.note import NoteResponse

logger = logging.getLogger(__name__)

STORE_ERRORS = (SQLAlchemyError, OSError)


def parse_note_id(note_id: Union[str, UUID]) -> UUID:
    """
    Convert a path parameter into a UUID.

    An id that cannot name any stored note is reported as not found rather
    than as a client error, so callers see one outcome for "no such note".
    """
    if isinstance(note_id, UUID):
        return note_id
    try:
        return UUID(str(note_id))
    except ValueError:
        raise NotFoundError(resource="note", resource_id=str(note_id)) from None


class NoteService:
    """
    Stateless CRUD layer; each call receives the session it works in.

    Responsibilities:
        - list_notes(): every note, store default order
        - get_note(): single note by id
        - create_note(): insert with generated id
        - update_note(): full replace of title and content
        - delete_note(): remove by id
    """

    async def list_notes(self, db: AsyncSession) -> List[NoteResponse]:
        """
        Return all notes.

        No ORDER BY is applied; the database returns rows in its natural
        order, which for a fresh table is insertion order.

        Raises:
            StoreUnavailableError: Query execution failed (→ 500)
        """
        try:
            result = await db.execute(select(Note))
            notes = result.scalars().all()
        except STORE_ERRORS as e:
            logger.error("Database error listing notes: %s", str(e), exc_info=True)
            raise StoreUnavailableError(
                message="Could not retrieve notes. Please try again.",
                context={"error_type": type(e).__name__},
            )

        return [NoteResponse.model_validate(note) for note in notes]

    async def get_note(self, db: AsyncSession, note_id: Union[str, UUID]) -> NoteResponse:
        """
        Retrieve a single note by id.

        Raises:
            NotFoundError: No note has this id (→ 404)
            StoreUnavailableError: Query execution failed (→ 500)
        """
        note = await self._load(db, parse_note_id(note_id))
        return NoteResponse.model_validate(note)

    async def create_note(
        self,
        db: AsyncSession,
        title: str = "",
        content: str = "",
    ) -> NoteResponse:
        """
        Persist a new note and return it with its generated id.

        Empty strings are stored as given. Repeated calls with the same
        values create separate notes.

        Raises:
            StoreUnavailableError: Insert or commit failed (→ 500)
        """
        note = Note(title=title, content=content)
        try:
            db.add(note)
            await db.flush()  # Assigns the id default before commit
            await db.commit()
        except STORE_ERRORS as e:
            await self._rollback(db)
            logger.error("Database error creating note: %s", str(e), exc_info=True)
            raise StoreUnavailableError(
                message="Could not save the note. Please try again.",
                context={"error_type": type(e).__name__},
            )

        logger.info("Note created: %s", note.id)
        return NoteResponse.model_validate(note)

    async def update_note(
        self,
        db: AsyncSession,
        note_id: Union[str, UUID],
        title: str = "",
        content: str = "",
    ) -> NoteResponse:
        """
        Replace title and content of an existing note.

        Raises:
            NotFoundError: No note has this id; nothing is written (→ 404)
                Also raised when the note is deleted concurrently.
            StoreUnavailableError: Query or commit failed (→ 500)
        """
        note = await self._load(db, parse_note_id(note_id))

        note.title = title
        note.content = content
        try:
            await db.commit()
        except StaleDataError:
            # Deleted by another request between the load and the UPDATE
            await self._rollback(db)
            raise NotFoundError(resource="note", resource_id=str(note_id))
        except STORE_ERRORS as e:
            await self._rollback(db)
            logger.error("Database error updating note %s: %s", note_id, str(e), exc_info=True)
            raise StoreUnavailableError(
                message="Could not update the note. Please try again.",
                context={"note_id": str(note_id), "error_type": type(e).__name__},
            )

        logger.info("Note updated: %s", note.id)
        return NoteResponse.model_validate(note)

    async def delete_note(self, db: AsyncSession, note_id: Union[str, UUID]) -> None:
        """
        Remove a note.

        Raises:
            NotFoundError: No note has this id (→ 404). A second delete of
                the same id therefore fails with NotFoundError.
            StoreUnavailableError: Query or commit failed (→ 500)
        """
        note = await self._load(db, parse_note_id(note_id))

        try:
            await db.delete(note)
            await db.commit()
        except STORE_ERRORS as e:
            await self._rollback(db)
            logger.error("Database error deleting note %s: %s", note_id, str(e), exc_info=True)
            raise StoreUnavailableError(
                message="Could not delete the note. Please try again.",
                context={"note_id": str(note_id), "error_type": type(e).__name__},
            )

        logger.info("Note deleted: %s", note_id)

    # ── Internals ─────────────────────────────────────────────────────────

    async def _load(self, db: AsyncSession, note_id: UUID) -> Note:
        """Fetch a note row or raise NotFoundError."""
        try:
            result = await db.execute(select(Note).where(Note.id == note_id))
            note = result.scalar_one_or_none()
        except STORE_ERRORS as e:
            logger.error("Database error fetching note %s: %s", note_id, str(e))
            raise StoreUnavailableError(
                message="Could not retrieve the note. Please try again.",
                context={"note_id": str(note_id), "error_type": type(e).__name__},
            )

        if note is None:
            raise NotFoundError(resource="note", resource_id=str(note_id))
        return note

    async def _rollback(self, db: AsyncSession) -> None:
        try:
            await db.rollback()
        except STORE_ERRORS:
            logger.warning("Rollback failed after store error", exc_info=True)


# ── Singleton Instance ────────────────────────────────────────────────────
note_service = NoteService()
