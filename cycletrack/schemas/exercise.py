from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import date, datetime


class Phase(BaseModel):
    weeks_duration: int = Field(ge=1, description="How many weeks this phase lasts")
    sets: int = Field(ge=0)
    reps: int = Field(ge=0)


class PhaseLoad(BaseModel):
    sets: int
    reps: int


class ExerciseCreate(BaseModel):
    # Имя используется в пути /exercises/{name}/complete, поэтому без "/"
    name: str = Field(min_length=1, pattern=r"^[^/]+$")
    rest_description: str = Field(default="", description="Rest between sets, display only")
    frequency: int = Field(ge=1, description="Sessions per cycle")
    rest_between_sessions: int = Field(ge=0, description="Rest days between sessions within a cycle")
    rest_before_next_round: int = Field(ge=0, description="Rest days after the last session of a cycle")
    stagger_days: int = Field(default=0, ge=0, description="Shift of the cycle start (0 = first day)")
    schedule: List[Phase] = Field(min_length=1)


class ExerciseResponse(BaseModel):
    name: str
    rest_description: str
    frequency: int
    rest_between_sessions: int
    rest_before_next_round: int
    stagger_days: int
    schedule: List[Phase]
    last_completed_date: Optional[datetime] = None
    session_count: int = 0

    class Config:
        from_attributes = True


class TodayExercise(BaseModel):
    exercise: ExerciseResponse
    sets: int
    reps: int
    last_completed_label: str


class TodayResponse(BaseModel):
    date: date
    date_label: str
    exercises: List[TodayExercise]
    message: Optional[str] = None


class ExerciseSaveResponse(BaseModel):
    exercise: ExerciseResponse
    message: str = "Exercise schedule saved successfully!"
