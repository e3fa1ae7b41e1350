"""Data models for liftlog."""

from .exercises import DEFAULT_EXERCISE_NAMES, Exercise, build_catalog
from .workout import (
    SessionStatus,
    SetField,
    WorkoutSession,
    WorkoutSet,
    WorkoutTemplate,
    validate_set_value,
)

__all__ = [
    "build_catalog",
    "DEFAULT_EXERCISE_NAMES",
    "Exercise",
    "SessionStatus",
    "SetField",
    "validate_set_value",
    "WorkoutSession",
    "WorkoutSet",
    "WorkoutTemplate",
]
