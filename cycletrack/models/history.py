from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from cycletrack.core.base import Base


class CompletionRecord(Base):
    __tablename__ = "completion_records"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    # Ссылка на упражнение по имени, без внешнего ключа: история не удаляется вместе с ним
    exercise_name = Column(String, nullable=False)
    sets_performed = Column(Integer, nullable=False)
    reps_performed = Column(Integer, nullable=False)
    rest_description = Column(String, nullable=False, default="")
    completed_at = Column(DateTime, nullable=False, index=True)

    user = relationship("User", back_populates="history")
