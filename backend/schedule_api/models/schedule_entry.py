"""
Schedule API — ScheduleEntry SQLAlchemy Model
==============================================

What:  ORM model for the `schedule_entries` table: one row per course a user
       is enrolled in during a semester.
Who:   Used by ScheduleService for add/get/remove.

Table Design:
    - Integer surrogate `id`: lets "add" echo a store-assigned identifier
    - No uniqueness on (user_id, semester_id, course_id); duplicates are the
      store's business
    - Composite index on (user_id, semester_id): every read is scoped to
      exactly one pair
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, Integer, func
from sqlalchemy.orm import Mapped, mapped_column

from schedule_api.database import Base


class ScheduleEntry(Base):
    """
    A user's enrollment in one course for one semester.

    Lifecycle:
        Created by POST /schedule/add, deleted by POST /schedule/remove.
        Never updated.
    """

    __tablename__ = "schedule_entries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    user_id: Mapped[int] = mapped_column(Integer, nullable=False)
    semester_id: Mapped[int] = mapped_column(Integer, nullable=False)
    course_id: Mapped[int] = mapped_column(Integer, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
    )

    __table_args__ = (
        Index("idx_schedule_entries_user_semester", "user_id", "semester_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<ScheduleEntry(id={self.id}, user_id={self.user_id}, "
            f"semester_id={self.semester_id}, course_id={self.course_id})>"
        )
