from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends

from cycletrack.api.v1.history import to_record_response
from cycletrack.core.dependencies import get_current_user, get_workout_service
from cycletrack.models.user import User
from cycletrack.schemas.exercise import (
    ExerciseCreate,
    ExerciseResponse,
    ExerciseSaveResponse,
    TodayResponse,
)
from cycletrack.schemas.history import CompleteExerciseResponse
from cycletrack.services.date_utils import format_date
from cycletrack.services.workout_service import WorkoutService

router = APIRouter(prefix="/exercises", tags=["exercises"])


@router.get("", response_model=List[ExerciseResponse])
async def list_exercises(
        current_user: User = Depends(get_current_user),
        service: WorkoutService = Depends(get_workout_service),
):
    return await service.list_exercises(current_user.id)


@router.put("", response_model=ExerciseSaveResponse)
async def save_exercise(
        data: ExerciseCreate,
        current_user: User = Depends(get_current_user),
        service: WorkoutService = Depends(get_workout_service),
):
    """Создать или заменить расписание упражнения (страница Setup)"""
    exercise = await service.save_exercise(current_user.id, data)
    return ExerciseSaveResponse(exercise=ExerciseResponse.model_validate(exercise))


@router.get("/today", response_model=TodayResponse)
async def todays_workout(
        current_user: User = Depends(get_current_user),
        service: WorkoutService = Depends(get_workout_service),
):
    now = datetime.now()
    exercises = await service.todays_exercises(current_user.id, now=now)
    return TodayResponse(
        date=now.date(),
        date_label=format_date(now),
        exercises=exercises,
        message=None if exercises else "No exercises due today! Enjoy your rest.",
    )


@router.post("/{name}/complete", response_model=CompleteExerciseResponse)
async def complete_exercise(
        name: str,
        current_user: User = Depends(get_current_user),
        service: WorkoutService = Depends(get_workout_service),
):
    record, exercise = await service.complete_exercise(current_user.id, name)
    return CompleteExerciseResponse(
        record=to_record_response(record),
        session_count=exercise.session_count,
        message=f"{exercise.name} completed successfully!",
    )
