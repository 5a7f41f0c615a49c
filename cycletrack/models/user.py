from datetime import datetime

from sqlalchemy import Column, Integer, DateTime
from sqlalchemy.orm import relationship

from cycletrack.core.base import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    created_at = Column(DateTime, default=datetime.now)

    exercises = relationship("ExerciseDefinition", back_populates="user", cascade="all, delete")
    history = relationship("CompletionRecord", back_populates="user", cascade="all, delete")
