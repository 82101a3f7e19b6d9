"""
Notes Client — State Model
============================

What:  The client's complete in-memory state as an immutable value, plus the
       pure functions that derive a new state from an old one.
Why:   The controller never mutates shared objects; it swaps one state for
       the next, and the presentation layer only ever reads a state.

State fields:
    notes       Current list of notes, replaced wholesale after each mutation
    form        Draft title/content bound to the form
    editing_id  Id of the note being edited, or None in create mode
"""

from typing import Iterable, Optional, Tuple
from uuid import UUID

from pydantic import BaseModel, Field

from notesapp.schemas.note import NoteResponse


class NoteDraft(BaseModel):
    """Unsaved title/content typed into the form."""
    title: str = ""
    content: str = ""

    model_config = {"frozen": True}


class ClientState(BaseModel):
    notes: Tuple[NoteResponse, ...] = Field(default_factory=tuple)
    form: NoteDraft = Field(default_factory=NoteDraft)
    editing_id: Optional[UUID] = None

    model_config = {"frozen": True}

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None


EMPTY_DRAFT = NoteDraft()


def replace_notes(state: ClientState, notes: Iterable[NoteResponse]) -> ClientState:
    return state.model_copy(update={"notes": tuple(notes)})


def set_form(
    state: ClientState,
    title: Optional[str] = None,
    content: Optional[str] = None,
) -> ClientState:
    """Change one or both draft fields; None leaves a field as it is."""
    draft = state.form.model_copy(
        update={
            k: v for k, v in (("title", title), ("content", content)) if v is not None
        }
    )
    return state.model_copy(update={"form": draft})


def begin_edit(state: ClientState, note: NoteResponse) -> ClientState:
    """Load a note into the form and switch to update mode."""
    return state.model_copy(
        update={
            "form": NoteDraft(title=note.title, content=note.content),
            "editing_id": note.id,
        }
    )


def finish_edit(state: ClientState) -> ClientState:
    """Leave update mode; the form keeps its contents."""
    return state.model_copy(update={"editing_id": None})


def clear_form(state: ClientState) -> ClientState:
    return state.model_copy(update={"form": EMPTY_DRAFT})
