from fastapi import APIRouter
from cycletrack.api.v1.auth import router as auth_router
from cycletrack.api.v1.exercises import router as exercises_router
from cycletrack.api.v1.history import router as history_router
from cycletrack.api.v1.calendar import router as calendar_router

api_router = APIRouter()

api_router.include_router(auth_router)
api_router.include_router(exercises_router)
api_router.include_router(history_router)
api_router.include_router(calendar_router)
