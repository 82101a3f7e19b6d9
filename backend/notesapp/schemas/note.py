"""
Notes Backend — Pydantic Request/Response Schemas
===================================================

What:  The API contract between clients and the server.
How:   FastAPI validates request bodies against these models, serializes
       responses through them and builds the OpenAPI document from them.

These models pin the record shape at the service boundary. Both text
fields default to the empty string and no further validation is applied.
"""

import uuid
from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class NoteCreate(BaseModel):
    """Body of POST /api/notes."""
    title: str = Field(default="", description="Note title (may be empty)")
    content: str = Field(default="", description="Note body (may be empty)")


class NoteUpdate(BaseModel):
    """
    Body of PUT /api/notes/{id}.

    Full replace: an omitted field is stored as the empty string.
    """
    title: str = Field(default="", description="New title")
    content: str = Field(default="", description="New content")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """A stored note as returned by every notes endpoint."""
    id: uuid.UUID = Field(description="Server-generated note identifier")
    title: str = Field(description="Note title")
    content: str = Field(description="Note body")

    model_config = {"from_attributes": True}


class ErrorResponse(BaseModel):
    """
    Error body shared by all handled errors.

    Example:
        {
            "error": "not_found",
            "message": "note with ID '6f1c...' was not found",
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy or unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
