"""
NoteKeeper Backend: Shared Response Schemas
============================================

Envelopes and documentation models shared by every router.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class MessageEnvelope(BaseModel):
    """Success envelope carrying only a message, e.g. after a delete."""

    error: bool = False
    message: str


class GreetingEnvelope(BaseModel):
    error: bool = False
    data: str


class ErrorResponse(BaseModel):
    """
    Failure envelope returned by every global exception handler.

    Fields:
        error:      Human-readable message (e.g. "title is required")
        kind:       Machine-readable error kind (e.g. "missing_field")
        details:    Extra context; for internal errors only outside production
        request_id: Correlation ID for tracing this error in server logs

    Example:
        {
            "error": "Note not found",
            "kind": "not_found",
            "request_id": "550e8400"
        }
    """

    error: str = Field(description="Human-readable error description")
    kind: str = Field(description="Machine-readable error kind")
    details: Optional[Any] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer probes."""

    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
