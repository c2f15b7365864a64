"""
HikeLog Backend - Shared Response Schemas
===========================================

What:  Response shapes shared by every route: errors, delete confirmations,
       and the health report.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Error body returned by every failing endpoint.

    Example:
        {
            "error": "invalid ObjectId: 'abc' is not a valid ObjectId ...",
            "request_id": "3f2a9c1d"
        }
    """
    error: str = Field(description="Error message (store errors are passed through verbatim)")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class MessageResponse(BaseModel):
    """Confirmation body, e.g. {"message": "Hiking deleted"}."""
    message: str


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
