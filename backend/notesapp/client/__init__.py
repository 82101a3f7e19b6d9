"""
Notes Client
=============

    - state:        ClientState and the pure functions that update it
    - controller:   NotesController, which calls the HTTP API with httpx
    - presentation: render(state) → HTML
"""

from notesapp.client.controller import DEFAULT_API_URL, NotesController
from notesapp.client.presentation import render
from notesapp.client.state import ClientState, NoteDraft

__all__ = ["ClientState", "NoteDraft", "NotesController", "DEFAULT_API_URL", "render"]
