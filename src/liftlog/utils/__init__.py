"""Helpers for liftlog."""

from .exercise_utils import find_matching_exercise, normalize_exercise_name
from .grouping import group_sets_by_exercise, grouped_sections, sorted_exercise_keys

__all__ = [
    "find_matching_exercise",
    "group_sets_by_exercise",
    "grouped_sections",
    "normalize_exercise_name",
    "sorted_exercise_keys",
]
