"""
Schedule API — Schedule Service
================================

What:  Reads and mutates a user's per-semester schedule of course enrollments.
How:   Each operation issues one parameterized statement on the session it is
       given; writes commit it before returning.
Who:   Called by the /schedule route handlers.

Error Handling Strategy:
    SQLAlchemy errors are wrapped: reads → QueryError, writes → InsertError.
    Writes commit before returning, so a failed commit surfaces as
    InsertError instead of a success response for a rolled-back row.
    A removal that matches nothing raises NotFoundError instead of
    succeeding silently.
"""

import logging
from typing import List

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from schedule_api.exceptions import InsertError, NotFoundError, QueryError
from schedule_api.models.schedule_entry import ScheduleEntry
from schedule_api.schemas.common import fits_store_int
from schedule_api.schemas.schedule import (
    ScheduleEntryCreate,
    ScheduleEntryRef,
    ScheduleEntryResponse,
    ScheduleRemoveResponse,
)

logger = logging.getLogger(__name__)


class ScheduleService:
    """
    Business logic layer for schedule entries.

    Stateless: the session arrives with each call, so one instance serves
    every request.
    """

    async def get_schedule(
        self,
        db: AsyncSession,
        user_id: int,
        semester_id: int,
    ) -> List[ScheduleEntryResponse]:
        """
        List the entries of one user in one semester.

        Query:
            SELECT ... FROM schedule_entries
            WHERE user_id = :user_id AND semester_id = :semester_id
            ORDER BY course_id, id

        Returns:
            The matching entries; an empty list when there are none
            (including ids outside the INTEGER range, which no row can hold).

        Raises:
            QueryError: the SELECT failed
        """
        if not (fits_store_int(user_id) and fits_store_int(semester_id)):
            return []

        try:
            result = await db.execute(
                select(ScheduleEntry)
                .where(
                    ScheduleEntry.user_id == user_id,
                    ScheduleEntry.semester_id == semester_id,
                )
                .order_by(ScheduleEntry.course_id, ScheduleEntry.id)
            )
            entries = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error(
                "Database error reading schedule user=%s semester=%s: %s",
                user_id, semester_id, str(e),
            )
            raise QueryError(
                message="Could not retrieve the schedule. Please try again.",
                context={
                    "user_id": user_id,
                    "semester_id": semester_id,
                    "error_type": type(e).__name__,
                },
            )

        return [ScheduleEntryResponse.model_validate(entry) for entry in entries]

    async def add_to_schedule(
        self,
        db: AsyncSession,
        entry: ScheduleEntryCreate,
    ) -> ScheduleEntryResponse:
        """
        Insert one schedule entry and echo it back with its assigned id.

        Raises:
            InsertError: constraint violation or other write failure
        """
        row = ScheduleEntry(
            user_id=entry.user_id,
            semester_id=entry.semester_id,
            course_id=entry.course_id,
        )
        try:
            db.add(row)
            await db.flush()  # Assigns the id
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error adding schedule entry %s: %s", entry.model_dump(), str(e))
            raise InsertError(
                message="Could not add the course to the schedule.",
                context={**entry.model_dump(), "error_type": type(e).__name__},
            )

        logger.info(
            "Schedule entry %s added: user=%s semester=%s course=%s",
            row.id, row.user_id, row.semester_id, row.course_id,
        )
        return ScheduleEntryResponse.model_validate(row)

    async def remove_from_schedule(
        self,
        db: AsyncSession,
        ref: ScheduleEntryRef,
    ) -> ScheduleRemoveResponse:
        """
        Delete every entry matching (user_id, semester_id, course_id).

        Raises:
            NotFoundError: no row matched
            InsertError: the DELETE failed
        """
        try:
            result = await db.execute(
                delete(ScheduleEntry).where(
                    ScheduleEntry.user_id == ref.user_id,
                    ScheduleEntry.semester_id == ref.semester_id,
                    ScheduleEntry.course_id == ref.course_id,
                )
            )
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error removing schedule entry %s: %s", ref.model_dump(), str(e))
            raise InsertError(
                message="Could not remove the course from the schedule.",
                context={**ref.model_dump(), "error_type": type(e).__name__},
            )

        removed = result.rowcount or 0
        if removed == 0:
            raise NotFoundError(
                resource="schedule entry",
                resource_id=f"{ref.user_id}/{ref.semester_id}/{ref.course_id}",
            )

        logger.info(
            "Removed %d schedule entr%s: user=%s semester=%s course=%s",
            removed, "y" if removed == 1 else "ies",
            ref.user_id, ref.semester_id, ref.course_id,
        )
        return ScheduleRemoveResponse(
            message=f"Course {ref.course_id} removed from schedule",
            removed=removed,
        )


# ── Singleton Instance ────────────────────────────────────────────────────
schedule_service = ScheduleService()
