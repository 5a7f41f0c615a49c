import logging
import calendar
from datetime import date, datetime
from typing import List, Optional, Tuple

from fastapi import HTTPException, status

from cycletrack.models.exercise import ExerciseDefinition
from cycletrack.models.history import CompletionRecord
from cycletrack.repositories.exercise_repository import ExerciseRepository
from cycletrack.repositories.history_repository import HistoryRepository
from cycletrack.schemas.calendar import CalendarDay, MonthRef, MonthViewResponse
from cycletrack.schemas.exercise import ExerciseCreate, ExerciseResponse, TodayExercise
from cycletrack.services.cycle_scheduler import CycleScheduler
from cycletrack.services.date_utils import format_date, to_local
from cycletrack.services.phase_resolver import PhaseResolver

logger = logging.getLogger(__name__)


def shift_month(year: int, month: int, delta: int) -> MonthRef:
    index = year * 12 + (month - 1) + delta
    return MonthRef(year=index // 12, month=index % 12 + 1)


class WorkoutService:
    """Связывает хранилище упражнений/истории с расчётом расписания"""

    def __init__(self, exercises: ExerciseRepository, history: HistoryRepository):
        self.exercises = exercises
        self.history = history

    async def save_exercise(self, user_id: int, data: ExerciseCreate) -> ExerciseDefinition:
        # Сохранение под тем же именем заменяет определение целиком, включая прогресс
        exercise = ExerciseDefinition(
            user_id=user_id,
            name=data.name,
            rest_description=data.rest_description,
            frequency=data.frequency,
            rest_between_sessions=data.rest_between_sessions,
            rest_before_next_round=data.rest_before_next_round,
            stagger_days=data.stagger_days,
            schedule=[phase.model_dump() for phase in data.schedule],
            last_completed_date=None,
            session_count=0,
        )
        # InvalidCadenceError для вырожденного цикла до записи в БД
        CycleScheduler.cycle_length(exercise)

        saved = await self.exercises.save(exercise)
        logger.info(f"User {user_id} saved exercise '{data.name}'")
        return saved

    async def list_exercises(self, user_id: int) -> List[ExerciseDefinition]:
        return await self.exercises.list_for_user(user_id)

    async def todays_exercises(self, user_id: int, now: Optional[datetime] = None) -> List[TodayExercise]:
        now = to_local(now) if now is not None else datetime.now()
        today = now.date()

        due = []
        for exercise in await self.exercises.list_for_user(user_id):
            if not CycleScheduler.is_due_on(exercise, today, today=today):
                continue
            load = PhaseResolver.resolve_current_phase(exercise.phases, exercise.last_completed_date, now)
            due.append(TodayExercise(
                exercise=ExerciseResponse.model_validate(exercise),
                sets=load.sets,
                reps=load.reps,
                last_completed_label=format_date(exercise.last_completed_date),
            ))
        return due

    async def complete_exercise(
            self,
            user_id: int,
            name: str,
            now: Optional[datetime] = None,
    ) -> Tuple[CompletionRecord, ExerciseDefinition]:
        now = to_local(now) if now is not None else datetime.now()

        # Блокировка строки: параллельные выполнения не теряют инкремент session_count
        exercise = await self.exercises.get_by_name(user_id, name, for_update=True)
        if exercise is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Exercise '{name}' not found"
            )

        # Нагрузка считается от предыдущего выполнения, до его перезаписи
        load = PhaseResolver.resolve_current_phase(exercise.phases, exercise.last_completed_date, now)

        exercise.last_completed_date = now
        exercise.session_count = (exercise.session_count or 0) + 1

        record = CompletionRecord(
            user_id=user_id,
            exercise_name=exercise.name,
            sets_performed=load.sets,
            reps_performed=load.reps,
            rest_description=exercise.rest_description or "",
            completed_at=now,
        )
        self.history.add(record)
        exercise = await self.exercises.save(exercise)

        logger.info(
            f"User {user_id} completed '{name}' ({load.sets}x{load.reps}), "
            f"session #{exercise.session_count}"
        )
        return record, exercise

    async def list_history(self, user_id: int) -> List[CompletionRecord]:
        return await self.history.list_for_user(user_id)

    async def month_view(
            self,
            user_id: int,
            year: int,
            month: int,
            today: Optional[date] = None,
    ) -> MonthViewResponse:
        today = today or date.today()
        following = shift_month(year, month, 1)

        exercises = await self.exercises.list_for_user(user_id)
        history = await self.history.list_between(
            user_id,
            datetime(year, month, 1),
            datetime(following.year, following.month, 1),
        )

        view = CycleScheduler.build_month_view(exercises, history, month, year, today=today)

        days = [
            CalendarDay(
                date=day,
                day=day.day,
                status=day_status.status,
                exercise_names=sorted(day_status.exercise_names),
                is_today=day == today,
            )
            for day, day_status in sorted(view.items())
        ]

        return MonthViewResponse(
            year=year,
            month=month,
            month_name=calendar.month_name[month],
            first_weekday=(date(year, month, 1).weekday() + 1) % 7,
            previous=shift_month(year, month, -1),
            next=following,
            days=days,
        )
