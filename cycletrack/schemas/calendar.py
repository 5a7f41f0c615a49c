from pydantic import BaseModel, Field
from typing import List, Set
from datetime import date
from enum import Enum


class DayStatusEnum(str, Enum):
    completed = "completed"
    scheduled = "scheduled"
    none = "none"


class DayStatus(BaseModel):
    status: DayStatusEnum = DayStatusEnum.none
    exercise_names: Set[str] = Field(default_factory=set)


class CalendarDay(BaseModel):
    date: date
    day: int
    status: DayStatusEnum
    exercise_names: List[str]
    is_today: bool = False


class MonthRef(BaseModel):
    year: int
    month: int


class MonthViewResponse(BaseModel):
    year: int
    month: int
    month_name: str
    # 0 = воскресенье, как в сетке календаря на фронте
    first_weekday: int
    previous: MonthRef
    next: MonthRef
    days: List[CalendarDay]
