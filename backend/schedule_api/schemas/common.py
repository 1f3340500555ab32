"""
Schedule API — Shared Response Schemas
=======================================

What:  Error envelope, info and health responses shared by every router,
       and the integer range every id column can hold.
"""

from typing import Optional

from pydantic import BaseModel, Field

# Id columns are 32-bit INTEGER (int4 on PostgreSQL)
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def fits_store_int(value: int) -> bool:
    """True when `value` can be bound to an INTEGER column."""
    return INT_MIN <= value <= INT_MAX


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {
            "error": "not_found",
            "message": "feedback with ID '42' was not found",
            "details": null,
            "request_id": "1f3a9c2e"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class InfoResponse(BaseModel):
    """Body of GET /."""
    info: str = Field(default="schedule API")


class HealthResponse(BaseModel):
    """Health check response showing service and store status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
