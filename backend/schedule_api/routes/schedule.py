"""
Schedule API — Schedule Route Handlers
=======================================

What:  GET /schedule/{user_id}/{semester_id}, POST /schedule/add,
       POST /schedule/remove.
How:   Extracts path params or the decoded body, delegates to ScheduleService,
       returns the raw result as JSON.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from schedule_api.database import get_db_session
from schedule_api.dependencies import parse_body
from schedule_api.schemas.common import ErrorResponse
from schedule_api.schemas.schedule import (
    ScheduleEntryCreate,
    ScheduleEntryRef,
    ScheduleEntryResponse,
    ScheduleRemoveResponse,
)
from schedule_api.services.schedule_service import schedule_service

router = APIRouter(prefix="/schedule", tags=["Schedule"])


@router.get(
    "/{user_id}/{semester_id}",
    response_model=List[ScheduleEntryResponse],
    responses={
        400: {"description": "Malformed identifiers", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List a user's schedule for one semester",
)
async def get_schedule(
    user_id: int,
    semester_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> List[ScheduleEntryResponse]:
    """Returns `[]` when the user has nothing scheduled that semester."""
    return await schedule_service.get_schedule(db, user_id=user_id, semester_id=semester_id)


@router.post(
    "/add",
    response_model=ScheduleEntryResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Missing or malformed fields", "model": ErrorResponse},
        500: {"description": "Insert failed", "model": ErrorResponse},
    },
    summary="Add a course to a user's semester schedule",
)
async def add_to_schedule(
    entry: ScheduleEntryCreate = Depends(parse_body(ScheduleEntryCreate)),
    db: AsyncSession = Depends(get_db_session),
) -> ScheduleEntryResponse:
    return await schedule_service.add_to_schedule(db, entry)


@router.post(
    "/remove",
    response_model=ScheduleRemoveResponse,
    responses={
        400: {"description": "Missing or malformed fields", "model": ErrorResponse},
        404: {"description": "No matching schedule entry", "model": ErrorResponse},
        500: {"description": "Delete failed", "model": ErrorResponse},
    },
    summary="Remove a course from a user's semester schedule",
)
async def remove_from_schedule(
    ref: ScheduleEntryRef = Depends(parse_body(ScheduleEntryRef)),
    db: AsyncSession = Depends(get_db_session),
) -> ScheduleRemoveResponse:
    """Deletes every row matching the triple; 404 if there were none."""
    return await schedule_service.remove_from_schedule(db, ref)
