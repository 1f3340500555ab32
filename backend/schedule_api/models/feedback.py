"""
Schedule API — Feedback SQLAlchemy Model
=========================================

What:  ORM model for the `feedback` table: free-text commentary, optionally
       rated and tied to a course, a user, or a schedule entry.
Who:   Used by FeedbackService for create/list/get.

Only `content` is required. The context columns are plain integers without
foreign keys; the referenced tables live outside this service.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, Float, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from schedule_api.database import Base


class Feedback(Base):
    """
    A feedback record keyed by a store-assigned integer id.

    Lifecycle:
        Created by POST /feedback; read in bulk or by id. Never updated or deleted.
    """

    __tablename__ = "feedback"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    content: Mapped[str] = mapped_column(Text, nullable=False)

    rating: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    course_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    user_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    schedule_entry_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<Feedback(id={self.id}, course_id={self.course_id}, rating={self.rating})>"
