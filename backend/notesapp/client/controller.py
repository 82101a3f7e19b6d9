"""
Notes Client — State Controller
=================================

What:  Drives the notes HTTP API and keeps the client's ClientState current.
How:   Each operation issues its request(s) with an httpx.AsyncClient and then
       swaps `self.state` for a new value built by the pure functions in
       notesapp.client.state.

Failure policy:
    Transport errors, non-2xx statuses and unreadable bodies surface as
    NetworkFailure. They are logged on the "notesapp.client.controller"
    logger and the state is left exactly as it was. Nothing is retried
    and nothing is shown to the end user.

Refresh ordering:
    Every refresh() takes the next value of a counter before it sends its
    request. When the response arrives it is applied only if no newer
    refresh has started in the meantime, so a slow, superseded refresh
    cannot overwrite the result of a later one.
"""

import logging
from typing import Any, List, Optional, Union
from uuid import UUID

import httpx

from notesapp.client.state import (
    ClientState,
    begin_edit,
    clear_form,
    finish_edit,
    replace_notes,
    set_form,
)
from notesapp.exceptions import NetworkFailure
from notesapp.schemas.note import NoteResponse

logger = logging.getLogger(__name__)

# The client is pointed at a local server; pass base_url to override.
DEFAULT_API_URL = "http://localhost:5000/api"


class NotesController:
    """
    Client State Controller.

    Usage:
        async with NotesController() as controller:  # loads the list on entry
            controller.update_form(title="Groceries", content="Milk, eggs")
            await controller.submit()
            print(render(controller.state))
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        client: Optional[httpx.AsyncClient] = None,
        state: Optional[ClientState] = None,
    ):
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(base_url=base_url)
        self.state = state or ClientState()
        self._refresh_seq = 0

    async def __aenter__(self) -> "NotesController":
        await self.refresh()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    # ── Operations ────────────────────────────────────────────────────────

    async def refresh(self) -> ClientState:
        """Fetch every note and replace the local list."""
        self._refresh_seq += 1
        token = self._refresh_seq

        try:
            payload = await self._request("GET", "/notes")
            notes = self._parse_notes(payload)
        except NetworkFailure as e:
            logger.error("Failed to fetch notes: %s | Context: %s", e.message, e.context)
            return self.state

        if token != self._refresh_seq:
            logger.debug("Discarding superseded refresh #%d (latest #%d)", token, self._refresh_seq)
            return self.state

        self.state = replace_notes(self.state, notes)
        return self.state

    async def submit(self) -> ClientState:
        """
        Save the draft: update the note being edited, or create a new one.

        On success the list is refreshed and the draft cleared. On failure
        the draft and edit mode are kept so the user can resubmit.
        """
        draft = self.state.form.model_dump()
        editing_id = self.state.editing_id

        try:
            if editing_id is not None:
                await self._request("PUT", f"/notes/{editing_id}", json=draft)
                self.state = finish_edit(self.state)
            else:
                await self._request("POST", "/notes", json=draft)
        except NetworkFailure as e:
            logger.error("Error adding/updating note: %s | Context: %s", e.message, e.context)
            return self.state

        await self.refresh()
        self.state = clear_form(self.state)
        return self.state

    async def remove(self, note_id: Union[str, UUID]) -> ClientState:
        """Delete a note, then refresh."""
        try:
            await self._request("DELETE", f"/notes/{note_id}")
        except NetworkFailure as e:
            logger.error("Error deleting note %s: %s | Context: %s", note_id, e.message, e.context)
            return self.state

        return await self.refresh()

    def begin_edit(self, note: NoteResponse) -> ClientState:
        self.state = begin_edit(self.state, note)
        return self.state

    def update_form(
        self,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> ClientState:
        self.state = set_form(self.state, title=title, content=content)
        return self.state

    # ── Transport ─────────────────────────────────────────────────────────

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        """Send one request; return the decoded JSON body (None when empty)."""
        try:
            response = await self._client.request(method, path, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise NetworkFailure(
                message=f"{method} {path} returned {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise NetworkFailure(
                message=f"{method} {path} failed: {type(e).__name__}",
                context={"error": str(e)},
            ) from e

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise NetworkFailure(message=f"{method} {path} returned a non-JSON body") from e

    @staticmethod
    def _parse_notes(payload: Any) -> List[NoteResponse]:
        if not isinstance(payload, list):
            raise NetworkFailure(message="Notes list response is not a JSON array")
        try:
            return [NoteResponse.model_validate(item) for item in payload]
        except ValueError as e:
            raise NetworkFailure(message="Notes list response has malformed items") from e
