"""
Общие фикстуры для тестов CycleTrack.

Стратегия:
- Тестовое FastAPI-приложение создаётся без startup-событий (нет подключения к БД).
- UserRepository заменяется на AsyncMock (mock_repo) для auth-эндпоинтов.
- Для эндпоинтов упражнений/истории/календаря используется настоящий WorkoutService
  поверх мокированных ExerciseRepository и HistoryRepository, чтобы расчёт
  расписания проходил через реальный код.
- JWT-токены создаются через auth_service.create_access_token().
"""

import pytest
from unittest.mock import AsyncMock, MagicMock
from httpx import AsyncClient, ASGITransport
from fastapi import FastAPI
from datetime import datetime
from typing import AsyncGenerator

from cycletrack.api.router import api_router
from cycletrack.core.dependencies import get_current_user, get_user_repository, get_workout_service
from cycletrack.core.exceptions import register_exception_handlers
from cycletrack.models import User, ExerciseDefinition
from cycletrack.repositories.exercise_repository import ExerciseRepository
from cycletrack.repositories.history_repository import HistoryRepository
from cycletrack.repositories.user_repository import UserRepository
from cycletrack.services.auth_service import auth_service
from cycletrack.services.workout_service import WorkoutService


# ---------------------------------------------------------------------------
# Вспомогательные функции
# ---------------------------------------------------------------------------

def create_test_app() -> FastAPI:
    """Тестовое FastAPI-приложение без startup-событий."""
    test_app = FastAPI(title="CycleTrack Test App")
    register_exception_handlers(test_app)
    test_app.include_router(api_router, prefix="/api/v1")
    return test_app


def make_auth_headers(user: User) -> dict:
    """Заголовки авторизации с валидным JWT для указанного пользователя."""
    access_token = auth_service.create_access_token(data={"sub": str(user.id)})
    return {"Authorization": f"Bearer {access_token}"}


def make_exercise(**overrides) -> ExerciseDefinition:
    """Упражнение из сценария A: 3 раза за 7-дневный цикл, без сдвига."""
    fields = dict(
        user_id=1,
        name="Push-ups",
        rest_description="60",
        frequency=3,
        rest_between_sessions=1,
        rest_before_next_round=2,
        stagger_days=0,
        schedule=[
            {"weeks_duration": 2, "sets": 3, "reps": 10},
            {"weeks_duration": 4, "sets": 4, "reps": 8},
        ],
        last_completed_date=None,
        session_count=0,
    )
    fields.update(overrides)
    return ExerciseDefinition(**fields)


# ---------------------------------------------------------------------------
# Фикстуры пользователей и зависимостей
# ---------------------------------------------------------------------------

@pytest.fixture
def user_fixture() -> User:
    """Анонимный пользователь."""
    return User(id=1, created_at=datetime.now())


@pytest.fixture
def mock_repo() -> AsyncMock:
    """Мокированный UserRepository для auth-эндпоинтов."""
    return AsyncMock(spec=UserRepository)


@pytest.fixture
def exercise_repo() -> AsyncMock:
    repo = AsyncMock(spec=ExerciseRepository)
    repo.list_for_user.return_value = []
    repo.get_by_name.return_value = None
    repo.save.side_effect = lambda exercise: exercise
    return repo


@pytest.fixture
def history_repo() -> AsyncMock:
    repo = AsyncMock(spec=HistoryRepository)
    repo.list_for_user.return_value = []
    repo.list_between.return_value = []

    def fake_add(record):
        record.id = 1

    repo.add = MagicMock(side_effect=fake_add)
    return repo


@pytest.fixture
def workout_service(exercise_repo, history_repo) -> WorkoutService:
    return WorkoutService(exercise_repo, history_repo)


# ---------------------------------------------------------------------------
# HTTP-клиенты
# ---------------------------------------------------------------------------

@pytest.fixture
async def client(mock_repo) -> AsyncGenerator[AsyncClient, None]:
    """
    Базовый клиент: get_user_repository → mock_repo.
    Используется для auth-эндпоинтов (anonymous, me).
    """
    app = create_test_app()
    app.dependency_overrides[get_user_repository] = lambda: mock_repo
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
async def user_client(user_fixture, mock_repo, workout_service) -> AsyncGenerator[AsyncClient, None]:
    """
    Клиент, аутентифицированный как user_fixture.
    get_current_user → user_fixture, get_workout_service → workout_service.
    """
    app = create_test_app()
    app.dependency_overrides[get_user_repository] = lambda: mock_repo
    app.dependency_overrides[get_current_user] = lambda: user_fixture
    app.dependency_overrides[get_workout_service] = lambda: workout_service
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
