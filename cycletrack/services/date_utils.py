from datetime import date, datetime
from typing import Optional, Union


def to_local(value: datetime) -> datetime:
    """Привести момент времени к локальному «настенному» времени без tzinfo"""
    if value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


def to_local_date(value: Union[date, datetime]) -> date:
    if isinstance(value, datetime):
        return to_local(value).date()
    return value


def format_date(value: Optional[Union[date, datetime]]) -> str:
    """'Monday, October 19, 2026' или 'N/A', если даты нет"""
    if value is None:
        return "N/A"
    day = to_local_date(value)
    return f"{day.strftime('%A')}, {day.strftime('%B')} {day.day}, {day.year}"
