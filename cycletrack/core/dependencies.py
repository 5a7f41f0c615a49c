from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from cycletrack.core.db import get_db
from cycletrack.models.user import User
from cycletrack.repositories.exercise_repository import ExerciseRepository
from cycletrack.repositories.history_repository import HistoryRepository
from cycletrack.repositories.user_repository import UserRepository
from cycletrack.services.auth_service import auth_service
from cycletrack.services.workout_service import WorkoutService


security = HTTPBearer()


def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    """Фабрика репозитория — инжектируется в эндпоинты через Depends."""
    return UserRepository(db)


def get_workout_service(db: AsyncSession = Depends(get_db)) -> WorkoutService:
    # Оба репозитория работают в одной сессии, чтобы выполнение коммитилось атомарно
    return WorkoutService(ExerciseRepository(db), HistoryRepository(db))


async def get_current_user(
        credentials: HTTPAuthorizationCredentials = Depends(security),
        repo: UserRepository = Depends(get_user_repository),
) -> User:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid access token",
        headers={"WWW-Authenticate": "Bearer"},
    )

    user_id = auth_service.decode_user_id(credentials.credentials)
    if user_id is None:
        raise credentials_exception

    user = await repo.get_by_id(user_id)
    if user is None:
        raise credentials_exception

    return user
