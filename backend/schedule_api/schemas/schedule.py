"""
Schedule API — Schedule Request/Response Schemas
=================================================

What:  Pydantic models for the /schedule endpoints.
How:   Request models are filled from a JSON object or form fields by
       `schedule_api.dependencies.parse_body`; lax-mode coercion turns form
       strings like "3" into integers. Response models read ORM rows directly
       (from_attributes).
"""

from datetime import datetime

from pydantic import BaseModel, Field

from schedule_api.schemas.common import INT_MAX, INT_MIN


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class ScheduleEntryCreate(BaseModel):
    """Body of POST /schedule/add."""
    user_id: int = Field(ge=INT_MIN, le=INT_MAX, description="Student identifier")
    semester_id: int = Field(ge=INT_MIN, le=INT_MAX, description="Academic term identifier")
    course_id: int = Field(ge=INT_MIN, le=INT_MAX, description="Course to enroll in")


class ScheduleEntryRef(BaseModel):
    """
    Body of POST /schedule/remove.

    All three fields are required: removal deletes every row matching the
    exact (user_id, semester_id, course_id) triple.
    """
    user_id: int = Field(ge=INT_MIN, le=INT_MAX, description="Student identifier")
    semester_id: int = Field(ge=INT_MIN, le=INT_MAX, description="Academic term identifier")
    course_id: int = Field(ge=INT_MIN, le=INT_MAX, description="Course to drop")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class ScheduleEntryResponse(BaseModel):
    """One schedule row, including the store-assigned fields."""
    id: int = Field(description="Store-assigned entry identifier")
    user_id: int
    semester_id: int
    course_id: int
    created_at: datetime = Field(description="When the entry was added (UTC ISO 8601)")

    model_config = {"from_attributes": True}


class ScheduleRemoveResponse(BaseModel):
    """Confirmation of POST /schedule/remove."""
    message: str = Field(description="Human-readable confirmation")
    removed: int = Field(description="Number of rows deleted (always >= 1)")
