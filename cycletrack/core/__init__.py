from cycletrack.core.config import settings
from cycletrack.core.base import Base
from cycletrack.core.db import engine, get_db, init_database

__all__ = ["settings", "engine", "Base", "get_db", "init_database"]
