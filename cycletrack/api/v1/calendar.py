from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from cycletrack.core.dependencies import get_current_user, get_workout_service
from cycletrack.models.user import User
from cycletrack.schemas.calendar import MonthViewResponse
from cycletrack.services.workout_service import WorkoutService

router = APIRouter(prefix="/calendar", tags=["calendar"])


@router.get("", response_model=MonthViewResponse)
async def get_month_view(
        year: Optional[int] = Query(None, ge=1, le=9998),
        month: Optional[int] = Query(None, ge=1, le=12),
        current_user: User = Depends(get_current_user),
        service: WorkoutService = Depends(get_workout_service),
):
    """Календарь месяца: выполненные, назначенные и пустые дни"""
    today = date.today()
    return await service.month_view(
        current_user.id,
        year=year or today.year,
        month=month or today.month,
        today=today,
    )
