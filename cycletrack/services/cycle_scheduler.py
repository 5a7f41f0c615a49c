import calendar
from datetime import date, datetime, timedelta
from typing import Dict, Iterable, Optional, Set, Union

from cycletrack.core.exceptions import InvalidCadenceError
from cycletrack.schemas.calendar import DayStatus, DayStatusEnum
from cycletrack.services.date_utils import to_local_date


class CycleScheduler:
    """Расчёт тренировочных дней по циклу упражнения.

    Цикл длины L содержит frequency активных дней: день k (k = 0..frequency-1)
    приходится на k * (1 + rest_between_sessions). Позиция даты в цикле
    считается от последнего выполнения и сдвигается назад на stagger_days.
    Упражнение может быть любым объектом с полями frequency,
    rest_between_sessions, rest_before_next_round, stagger_days и
    last_completed_date (ORM-модель или схема).
    """

    @staticmethod
    def cycle_length(exercise) -> int:
        if exercise.frequency is None or exercise.frequency < 1:
            raise InvalidCadenceError(
                f"Frequency must be at least 1, got {exercise.frequency!r} for '{exercise.name}'"
            )

        length = (
            (exercise.frequency - 1) * exercise.rest_between_sessions
            + exercise.rest_before_next_round
            + exercise.frequency
        )
        if length <= 0:
            raise InvalidCadenceError(f"Cycle length must be positive, got {length} for '{exercise.name}'")
        return length

    @staticmethod
    def slot_offsets(exercise) -> Set[int]:
        step = 1 + exercise.rest_between_sessions
        return {k * step for k in range(exercise.frequency)}

    @staticmethod
    def due_without_history(candidate: date, today: date) -> bool:
        # Ни разу не выполненное упражнение назначено только на сегодня
        return candidate == today

    @staticmethod
    def precedes_last_completion(days_since: int, candidate: date, today: date) -> bool:
        # Сегодняшний день пересчитывается всегда, даже если сохранённое
        # выполнение формально позже него
        return days_since < 0 and candidate != today

    @classmethod
    def is_due_on(
            cls,
            exercise,
            candidate_date: Union[date, datetime],
            today: Optional[date] = None,
    ) -> bool:
        length = cls.cycle_length(exercise)
        candidate = to_local_date(candidate_date)
        today = to_local_date(today) if today is not None else date.today()

        if exercise.last_completed_date is None:
            return cls.due_without_history(candidate, today)

        days_since = (candidate - to_local_date(exercise.last_completed_date)).days
        if cls.precedes_last_completion(days_since, candidate, today):
            return False

        stagger = exercise.stagger_days or 0
        day_in_cycle = ((days_since % length) + length) % length
        shifted = (day_in_cycle + (length - stagger)) % length
        return shifted in cls.slot_offsets(exercise)

    @classmethod
    def build_month_view(
            cls,
            exercises: Iterable,
            history: Iterable,
            month: int,
            year: int,
            today: Optional[date] = None,
    ) -> Dict[date, DayStatus]:
        """Статус каждого дня месяца: completed > scheduled > none"""
        today = to_local_date(today) if today is not None else date.today()
        _, days_in_month = calendar.monthrange(year, month)
        first_day = date(year, month, 1)
        days = [first_day + timedelta(days=offset) for offset in range(days_in_month)]

        month_view: Dict[date, DayStatus] = {day: DayStatus() for day in days}

        for record in history:
            completed_on = to_local_date(record.completed_at)
            day_status = month_view.get(completed_on)
            if day_status is None:
                continue
            day_status.status = DayStatusEnum.completed
            day_status.exercise_names.add(record.exercise_name)

        exercises = list(exercises)
        for day in days:
            day_status = month_view[day]
            for exercise in exercises:
                if cls.is_due_on(exercise, day, today=today):
                    day_status.exercise_names.add(exercise.name)
                    if day_status.status != DayStatusEnum.completed:
                        day_status.status = DayStatusEnum.scheduled

        return month_view
