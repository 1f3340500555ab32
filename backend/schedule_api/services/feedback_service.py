"""
Schedule API — Feedback Service
================================

What:  Lists, fetches, and creates feedback records.
Who:   Called by the /feedback route handlers.
"""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from schedule_api.exceptions import InsertError, NotFoundError, QueryError
from schedule_api.models.feedback import Feedback
from schedule_api.schemas.common import fits_store_int
from schedule_api.schemas.feedback import FeedbackCreate, FeedbackResponse

logger = logging.getLogger(__name__)


class FeedbackService:
    """Business logic layer for feedback. Stateless, like ScheduleService."""

    async def list_feedback(self, db: AsyncSession) -> List[FeedbackResponse]:
        """
        Return every feedback record ordered by id.

        Raises:
            QueryError: the SELECT failed
        """
        try:
            result = await db.execute(select(Feedback).order_by(Feedback.id))
            rows = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing feedback: %s", str(e), exc_info=True)
            raise QueryError(
                message="Could not retrieve feedback. Please try again.",
                context={"error_type": type(e).__name__},
            )

        return [FeedbackResponse.model_validate(row) for row in rows]

    async def get_feedback(self, db: AsyncSession, feedback_id: int) -> FeedbackResponse:
        """
        Fetch one feedback record by primary key.

        Query plan:
            SELECT ... FROM feedback WHERE id = :id  → primary key lookup

        Raises:
            NotFoundError: no record has this id (→ 404, not a store error).
                           Ids outside the INTEGER range never reach the store.
            QueryError: the SELECT failed
        """
        if not fits_store_int(feedback_id):
            raise NotFoundError(resource="feedback", resource_id=str(feedback_id))

        try:
            result = await db.execute(select(Feedback).where(Feedback.id == feedback_id))
            row = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error fetching feedback %s: %s", feedback_id, str(e))
            raise QueryError(
                message="Could not retrieve the feedback. Please try again.",
                context={"feedback_id": feedback_id, "error_type": type(e).__name__},
            )

        if row is None:
            raise NotFoundError(resource="feedback", resource_id=str(feedback_id))

        return FeedbackResponse.model_validate(row)

    async def create_feedback(self, db: AsyncSession, payload: FeedbackCreate) -> FeedbackResponse:
        """
        Insert one feedback record and return it with its assigned id.

        Raises:
            InsertError: constraint violation or other write failure
        """
        row = Feedback(**payload.model_dump())
        try:
            db.add(row)
            await db.flush()
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error creating feedback: %s", str(e))
            raise InsertError(
                message="Could not save the feedback.",
                context={"error_type": type(e).__name__},
            )

        logger.info("Feedback %s created (course=%s)", row.id, row.course_id)
        return FeedbackResponse.model_validate(row)


# ── Singleton Instance ────────────────────────────────────────────────────
feedback_service = FeedbackService()
