"""
Notes Backend — Note SQLAlchemy Model
=======================================

What:  ORM model representing the `notes` table.
Who:   Used by NoteService for CRUD and by init_store() for schema creation.

Table Design:
    - id: UUID generated in Python at insert time, so the value is known
      before the row is flushed and works the same on PostgreSQL and SQLite
    - title / content: TEXT, empty string by default; no length limit
    - No timestamps, no owner, no version column
"""

import uuid

from sqlalchemy import Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from notesapp.database import Base


class Note(Base):
    """
    A single note.

    Lifecycle:
        1. Inserted on create; id assigned here and never changed
        2. title and content replaced together on update
        3. Row deleted on delete (no soft-delete, no history)
    """

    __tablename__ = "notes"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    title: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
    )

    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title={self.title!r})>"
