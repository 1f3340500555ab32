"""
Schedule API — Feedback Route Handlers
=======================================

What:  GET /feedback (list), GET /feedback/{id} (detail), POST /feedback (create).
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from schedule_api.database import get_db_session
from schedule_api.dependencies import parse_body
from schedule_api.schemas.common import ErrorResponse
from schedule_api.schemas.feedback import FeedbackCreate, FeedbackResponse
from schedule_api.services.feedback_service import feedback_service

router = APIRouter(prefix="/feedback", tags=["Feedback"])


@router.get(
    "",
    response_model=List[FeedbackResponse],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List all feedback",
)
async def list_feedback(
    db: AsyncSession = Depends(get_db_session),
) -> List[FeedbackResponse]:
    return await feedback_service.list_feedback(db)


@router.get(
    "/{feedback_id}",
    response_model=FeedbackResponse,
    responses={
        400: {"description": "Malformed id", "model": ErrorResponse},
        404: {"description": "Feedback not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get a single feedback record by id",
)
async def get_feedback(
    feedback_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> FeedbackResponse:
    """
    Args:
        feedback_id: integer path parameter. Non-integers are rejected with
                     400 by the request-validation handler in main.py.
    """
    return await feedback_service.get_feedback(db, feedback_id)


@router.post(
    "",
    response_model=FeedbackResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Missing or malformed fields", "model": ErrorResponse},
        500: {"description": "Insert failed", "model": ErrorResponse},
    },
    summary="Create a feedback record",
)
async def create_feedback(
    payload: FeedbackCreate = Depends(parse_body(FeedbackCreate)),
    db: AsyncSession = Depends(get_db_session),
) -> FeedbackResponse:
    return await feedback_service.create_feedback(db, payload)
