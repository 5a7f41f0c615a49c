from typing import List

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship

from cycletrack.core.base import Base
from cycletrack.schemas.exercise import Phase


class ExerciseDefinition(Base):
    __tablename__ = "exercises"

    user_id = Column(Integer, ForeignKey("users.id"), primary_key=True)
    name = Column(String, primary_key=True)
    rest_description = Column(String, nullable=False, default="")
    frequency = Column(Integer, nullable=False)
    rest_between_sessions = Column(Integer, nullable=False, default=0)
    rest_before_next_round = Column(Integer, nullable=False, default=0)
    stagger_days = Column(Integer, nullable=False, default=0)
    # Список фаз: [{"weeks_duration": 2, "sets": 3, "reps": 10}, ...]
    schedule = Column(JSON, nullable=False)
    last_completed_date = Column(DateTime, nullable=True)
    session_count = Column(Integer, nullable=False, default=0)

    user = relationship("User", back_populates="exercises")

    @property
    def phases(self) -> List[Phase]:
        return [Phase.model_validate(phase) for phase in self.schedule or []]
