"""Workout store for liftlog."""

from .results import CommandRejectedError, NotFoundError, ResultStatus, StoreResult
from .snapshot import StoreSnapshot
from .workout_store import WorkoutStore

__all__ = [
    "CommandRejectedError",
    "NotFoundError",
    "ResultStatus",
    "StoreResult",
    "StoreSnapshot",
    "WorkoutStore",
]
