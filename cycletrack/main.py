import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cycletrack.api.router import api_router
from cycletrack.core import init_database, settings
from cycletrack.core.exceptions import register_exception_handlers

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="CycleTrack - workout cycle scheduler")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)
app.include_router(api_router)


@app.on_event("startup")
async def startup_event():
    await init_database()
    logger.info("CycleTrack started")


@app.get("/")
async def root():
    base_url = "http://localhost:8000"

    return {
        "app": "CycleTrack",
        "message": "CycleTrack - know which exercises are due today",
        "links": {
            "Today": f"{base_url}/exercises/today",
            "History": f"{base_url}/history",
            "Calendar": f"{base_url}/calendar",
            "Setup": f"{base_url}/exercises",
            "Docs": f"{base_url}/docs",
        }
    }
