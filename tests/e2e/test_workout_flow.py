"""
E2E тест полного цикла работы с упражнением.

Сценарий: анонимный вход → Setup → Today → выполнение → History → Calendar.

Стратегия: полный HTTP-стек через httpx.AsyncClient, аутентификация по
настоящему JWT. Репозитории заменены простыми in-memory реализациями, чтобы
состояние сохранялось между запросами без БД.
"""

import pytest
from datetime import date, datetime
from typing import Dict, List, Optional, Tuple
from httpx import AsyncClient, ASGITransport

from cycletrack.core.dependencies import get_user_repository, get_workout_service
from cycletrack.models import User, ExerciseDefinition, CompletionRecord
from cycletrack.services.workout_service import WorkoutService
from tests.conftest import create_test_app

pytestmark = pytest.mark.e2e


class InMemoryUserRepository:
    def __init__(self):
        self.users: Dict[int, User] = {}

    async def get_by_id(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    async def create_user(self, user: User) -> User:
        user.id = len(self.users) + 1
        self.users[user.id] = user
        return user


class InMemoryExerciseRepository:
    def __init__(self):
        self.exercises: Dict[Tuple[int, str], ExerciseDefinition] = {}

    async def list_for_user(self, user_id: int) -> List[ExerciseDefinition]:
        return sorted(
            (exercise for (owner, _), exercise in self.exercises.items() if owner == user_id),
            key=lambda exercise: exercise.name,
        )

    async def get_by_name(self, user_id: int, name: str, for_update: bool = False) -> Optional[ExerciseDefinition]:
        return self.exercises.get((user_id, name))

    async def save(self, exercise: ExerciseDefinition) -> ExerciseDefinition:
        self.exercises[(exercise.user_id, exercise.name)] = exercise
        return exercise


class InMemoryHistoryRepository:
    def __init__(self):
        self.records: List[CompletionRecord] = []

    async def list_for_user(self, user_id: int) -> List[CompletionRecord]:
        own = [record for record in self.records if record.user_id == user_id]
        return sorted(own, key=lambda record: record.completed_at, reverse=True)

    async def list_between(self, user_id: int, start: datetime, end: datetime) -> List[CompletionRecord]:
        return [
            record for record in self.records
            if record.user_id == user_id and start <= record.completed_at < end
        ]

    def add(self, record: CompletionRecord) -> None:
        record.id = len(self.records) + 1
        self.records.append(record)


@pytest.fixture
async def e2e_client():
    users = InMemoryUserRepository()
    service = WorkoutService(InMemoryExerciseRepository(), InMemoryHistoryRepository())

    app = create_test_app()
    app.dependency_overrides[get_user_repository] = lambda: users
    app.dependency_overrides[get_workout_service] = lambda: service
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.mark.asyncio
async def test_setup_complete_and_calendar_flow(e2e_client):
    # 1. Анонимный вход
    auth_response = await e2e_client.post("/api/v1/auth/anonymous")
    assert auth_response.status_code == 200
    headers = {"Authorization": f"Bearer {auth_response.json()['access_token']}"}

    # 2. Setup
    save_response = await e2e_client.put("/api/v1/exercises", headers=headers, json={
        "name": "Push-ups",
        "rest_description": "60",
        "frequency": 3,
        "rest_between_sessions": 1,
        "rest_before_next_round": 2,
        "stagger_days": 0,
        "schedule": [{"weeks_duration": 2, "sets": 3, "reps": 10}],
    })
    assert save_response.status_code == 200

    # 3. Ни разу не выполненное упражнение назначено на сегодня
    today_response = await e2e_client.get("/api/v1/exercises/today", headers=headers)
    assert [item["exercise"]["name"] for item in today_response.json()["exercises"]] == ["Push-ups"]

    # 4. Выполнение
    complete_response = await e2e_client.post("/api/v1/exercises/Push-ups/complete", headers=headers)
    assert complete_response.status_code == 200
    assert complete_response.json()["session_count"] == 1

    # 5. История
    history = (await e2e_client.get("/api/v1/history", headers=headers)).json()
    assert len(history) == 1
    assert history[0]["exercise_name"] == "Push-ups"
    assert (history[0]["sets_performed"], history[0]["reps_performed"]) == (3, 10)

    # 6. Календарь: сегодня выполнено
    today = date.today()
    calendar = (await e2e_client.get(
        "/api/v1/calendar", headers=headers, params={"year": today.year, "month": today.month}
    )).json()
    todays = next(day for day in calendar["days"] if day["is_today"])
    assert todays["status"] == "completed"
    assert todays["exercise_names"] == ["Push-ups"]

    # 7. Счётчик и дата выполнения сохранены
    exercises = (await e2e_client.get("/api/v1/exercises", headers=headers)).json()
    assert exercises[0]["session_count"] == 1
    assert exercises[0]["last_completed_date"] is not None


@pytest.mark.asyncio
async def test_users_do_not_see_each_other_exercises(e2e_client):
    first = (await e2e_client.post("/api/v1/auth/anonymous")).json()
    second = (await e2e_client.post("/api/v1/auth/anonymous")).json()
    assert first["user_id"] != second["user_id"]

    await e2e_client.put(
        "/api/v1/exercises",
        headers={"Authorization": f"Bearer {first['access_token']}"},
        json={
            "name": "Squats",
            "frequency": 1,
            "rest_between_sessions": 0,
            "rest_before_next_round": 1,
            "schedule": [{"weeks_duration": 1, "sets": 5, "reps": 5}],
        },
    )

    response = await e2e_client.get(
        "/api/v1/exercises",
        headers={"Authorization": f"Bearer {second['access_token']}"},
    )
    assert response.json() == []
