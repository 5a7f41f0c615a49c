from cycletrack.models.user import User
from cycletrack.models.exercise import ExerciseDefinition
from cycletrack.models.history import CompletionRecord

__all__ = [
    "User",
    "ExerciseDefinition",
    "CompletionRecord",
]
