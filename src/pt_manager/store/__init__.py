"""In-memory stores for pt-manager."""

from .repositories import CustomerStore, TrainingStore
from .state import TrainerState

__all__ = [
    "CustomerStore",
    "TrainerState",
    "TrainingStore",
]
