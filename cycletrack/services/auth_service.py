import logging
from datetime import datetime, timedelta
from typing import Optional, Tuple

from jose import jwt, JWTError

from cycletrack.core.config import settings
from cycletrack.models.user import User
from cycletrack.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self):
        self.SECRET_KEY = settings.SECRET_KEY
        self.ALGORITHM = settings.ALGORITHM
        self.ACCESS_TOKEN_EXPIRE_MINUTES = settings.ACCESS_TOKEN_EXPIRE_MINUTES

    def create_access_token(self, data: dict, expires_delta: Optional[timedelta] = None) -> str:
        to_encode = data.copy()
        if expires_delta:
            expire = datetime.utcnow() + expires_delta
        else:
            expire = datetime.utcnow() + timedelta(minutes=self.ACCESS_TOKEN_EXPIRE_MINUTES)
        to_encode.update({"exp": expire})
        return jwt.encode(to_encode, self.SECRET_KEY, algorithm=self.ALGORITHM)

    def decode_user_id(self, token: str) -> Optional[int]:
        """ID пользователя из access-токена или None, если токен невалиден"""
        try:
            payload = jwt.decode(token, self.SECRET_KEY, algorithms=[self.ALGORITHM])
        except JWTError:
            return None

        user_id = payload.get("sub")
        if user_id is None or not str(user_id).isdigit():
            return None
        return int(user_id)

    async def sign_in_anonymously(self, repo: UserRepository) -> Tuple[User, str]:
        """Создать анонимного пользователя и выдать ему access-токен"""
        user = await repo.create_user(User(created_at=datetime.now()))
        logger.info(f"Anonymous user {user.id} signed in")
        access_token = self.create_access_token(data={"sub": str(user.id)})
        return user, access_token


# Экземпляр сервиса для импорта
auth_service = AuthService()
