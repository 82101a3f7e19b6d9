"""
Notes Backend — Notes Route Handlers
======================================

What:  REST endpoints for the note lifecycle.
How:   Each handler takes a request-scoped session, delegates to NoteService
       and returns a schema; exceptions are mapped to status codes by the
       global handlers registered in main.py.

Routes (mounted under settings.api_prefix, "/api" by default):
    GET    /notes        → 200, list of notes
    GET    /notes/{id}   → 200, single note        | 404
    POST   /notes        → 201, created note
    PUT    /notes/{id}   → 200, updated note       | 404
    DELETE /notes/{id}   → 204, empty body         | 404
    Any store failure    → 500
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from notesapp.config import settings
from notesapp.database import get_db_session
from notesapp.schemas.note import (
    ErrorResponse,
    NoteCreate,
    NoteResponse,
    NoteUpdate,
)
from notesapp.services.note_service import note_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix=settings.api_prefix, tags=["Notes"])

_NOT_FOUND = {"description": "Note not found", "model": ErrorResponse}
_SERVER_ERROR = {"description": "Note store unavailable", "model": ErrorResponse}


@router.get(
    "/notes",
    response_model=List[NoteResponse],
    responses={500: _SERVER_ERROR},
    summary="List all notes",
)
async def list_notes(
    db: AsyncSession = Depends(get_db_session),
) -> List[NoteResponse]:
    """Returns every stored note. No pagination, no filtering."""
    return await note_service.list_notes(db)


@router.get(
    "/notes/{note_id}",
    response_model=NoteResponse,
    responses={404: _NOT_FOUND, 500: _SERVER_ERROR},
    summary="Get a single note by ID",
)
async def get_note(
    note_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> NoteResponse:
    return await note_service.get_note(db, note_id)


@router.post(
    "/notes",
    response_model=NoteResponse,
    status_code=status.HTTP_201_CREATED,
    responses={500: _SERVER_ERROR},
    summary="Create a note",
)
async def create_note(
    payload: NoteCreate,
    db: AsyncSession = Depends(get_db_session),
) -> NoteResponse:
    """
    Create a note from `{title, content}`.

    There is no idempotency key: posting the same body twice stores two notes.
    """
    return await note_service.create_note(db, title=payload.title, content=payload.content)


@router.put(
    "/notes/{note_id}",
    response_model=NoteResponse,
    responses={404: _NOT_FOUND, 500: _SERVER_ERROR},
    summary="Replace a note's title and content",
)
async def update_note(
    note_id: str,
    payload: NoteUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> NoteResponse:
    return await note_service.update_note(
        db, note_id, title=payload.title, content=payload.content
    )


@router.delete(
    "/notes/{note_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: _NOT_FOUND, 500: _SERVER_ERROR},
    summary="Delete a note",
)
async def delete_note(
    note_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await note_service.delete_note(db, note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
