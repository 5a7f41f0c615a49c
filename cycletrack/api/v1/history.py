from typing import List

from fastapi import APIRouter, Depends

from cycletrack.core.dependencies import get_current_user, get_workout_service
from cycletrack.models.history import CompletionRecord
from cycletrack.models.user import User
from cycletrack.schemas.history import CompletionRecordResponse
from cycletrack.services.date_utils import format_date
from cycletrack.services.workout_service import WorkoutService

router = APIRouter(prefix="/history", tags=["history"])


def to_record_response(record: CompletionRecord) -> CompletionRecordResponse:
    return CompletionRecordResponse(
        id=record.id,
        exercise_name=record.exercise_name,
        sets_performed=record.sets_performed,
        reps_performed=record.reps_performed,
        rest_description=record.rest_description or "",
        completed_at=record.completed_at,
        completed_label=format_date(record.completed_at),
    )


@router.get("", response_model=List[CompletionRecordResponse])
async def get_history(
        current_user: User = Depends(get_current_user),
        service: WorkoutService = Depends(get_workout_service),
):
    """История выполнений, новые первыми"""
    records = await service.list_history(current_user.id)
    return [to_record_response(record) for record in records]
