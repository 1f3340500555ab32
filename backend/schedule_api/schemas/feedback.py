"""
Schedule API — Feedback Request/Response Schemas
=================================================

What:  Pydantic models for the /feedback endpoints.

`content` is the only required input. The optional fields attach the
feedback to a course, a user, or a schedule entry and carry a rating; they
are stored as given (basic type coercion only).
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from schedule_api.schemas.common import INT_MAX, INT_MIN


class FeedbackCreate(BaseModel):
    """Body of POST /feedback."""
    content: str = Field(description="Free-text feedback")
    rating: Optional[float] = Field(default=None, description="Numeric rating, if any")
    course_id: Optional[int] = Field(
        default=None, ge=INT_MIN, le=INT_MAX, description="Course the feedback is about",
    )
    user_id: Optional[int] = Field(
        default=None, ge=INT_MIN, le=INT_MAX, description="Author of the feedback",
    )
    schedule_entry_id: Optional[int] = Field(
        default=None,
        ge=INT_MIN,
        le=INT_MAX,
        description="Schedule entry the feedback is about",
    )


class FeedbackResponse(BaseModel):
    """A stored feedback record."""
    id: int = Field(description="Store-assigned identifier")
    content: str
    rating: Optional[float] = None
    course_id: Optional[int] = None
    user_id: Optional[int] = None
    schedule_entry_id: Optional[int] = None
    created_at: datetime = Field(description="When the feedback was created (UTC ISO 8601)")

    model_config = {"from_attributes": True}
