from pydantic import BaseModel
from datetime import datetime
from typing import Optional


class AuthResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user_id: int


class UserRead(BaseModel):
    id: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
