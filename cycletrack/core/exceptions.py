import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class SchedulingError(Exception):
    """Базовая ошибка расчёта расписания"""


class InvalidScheduleError(SchedulingError):
    """Прогрессивное расписание не содержит ни одной фазы"""


class InvalidCadenceError(SchedulingError):
    """Частота или длина цикла не позволяют построить цикл"""


async def scheduling_error_handler(request: Request, exc: SchedulingError) -> JSONResponse:
    logger.error(f"Scheduling error on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SchedulingError, scheduling_error_handler)
