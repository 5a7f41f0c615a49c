from pydantic import BaseModel
from datetime import datetime


class CompletionRecordResponse(BaseModel):
    id: int
    exercise_name: str
    sets_performed: int
    reps_performed: int
    rest_description: str
    completed_at: datetime
    completed_label: str = ""

    class Config:
        from_attributes = True


class CompleteExerciseResponse(BaseModel):
    record: CompletionRecordResponse
    session_count: int
    message: str
