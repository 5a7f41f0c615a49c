from fastapi import APIRouter, Depends

from cycletrack.core.dependencies import get_current_user, get_user_repository
from cycletrack.models.user import User
from cycletrack.repositories.user_repository import UserRepository
from cycletrack.schemas.auth import AuthResponse, UserRead
from cycletrack.services.auth_service import auth_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/anonymous", response_model=AuthResponse)
async def sign_in_anonymously(repo: UserRepository = Depends(get_user_repository)):
    """Анонимный вход: новый пользователь и access-токен для него"""
    user, access_token = await auth_service.sign_in_anonymously(repo)
    return AuthResponse(access_token=access_token, token_type="bearer", user_id=user.id)


@router.get("/me", response_model=UserRead)
async def me(current_user: User = Depends(get_current_user)):
    return current_user
