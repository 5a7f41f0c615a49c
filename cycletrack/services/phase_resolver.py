from datetime import datetime, timedelta
from typing import Optional, Sequence

from cycletrack.core.exceptions import InvalidScheduleError
from cycletrack.schemas.exercise import Phase, PhaseLoad
from cycletrack.services.date_utils import to_local

ONE_WEEK = timedelta(weeks=1)


class PhaseResolver:
    """Выбор нагрузки (подходы/повторы) по прогрессивному расписанию.

    Фазы идут по порядку, каждая действует weeks_duration недель с момента
    последнего выполнения. После последней фазы прогрессия останавливается
    на ней же, без повторного прохода по расписанию.
    """

    @staticmethod
    def weeks_elapsed(last_completed_date: datetime, now: datetime) -> int:
        # Неполная неделя не переводит в следующую фазу
        return (to_local(now) - to_local(last_completed_date)) // ONE_WEEK

    @classmethod
    def resolve_current_phase(
            cls,
            schedule: Sequence[Phase],
            last_completed_date: Optional[datetime],
            now: datetime,
    ) -> PhaseLoad:
        if not schedule:
            raise InvalidScheduleError("Progressive schedule must contain at least one phase")

        if last_completed_date is None:
            first_phase = schedule[0]
            return PhaseLoad(sets=first_phase.sets, reps=first_phase.reps)

        weeks_passed = cls.weeks_elapsed(last_completed_date, now)

        total_weeks = 0
        for phase in schedule:
            total_weeks += phase.weeks_duration
            if weeks_passed < total_weeks:
                return PhaseLoad(sets=phase.sets, reps=phase.reps)

        last_phase = schedule[-1]
        return PhaseLoad(sets=last_phase.sets, reps=last_phase.reps)
