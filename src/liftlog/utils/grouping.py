"""Grouping helpers for rendering templates and sessions by exercise.

All functions here are pure: they read sets and a catalog and build new
containers. Screens recompute them from the latest snapshot on every render.
"""

from typing import Iterable, Mapping
from uuid import UUID

from ..models.exercises import Exercise
from ..models.workout import WorkoutSet

Catalog = Mapping[UUID, Exercise] | Iterable[Exercise]


def _as_mapping(exercises: Catalog) -> Mapping[UUID, Exercise]:
    if isinstance(exercises, Mapping):
        return exercises
    return {exercise.id: exercise for exercise in exercises}


def group_sets_by_exercise(
    sets: Iterable[WorkoutSet],
    exercises: Catalog,
) -> dict[Exercise, list[WorkoutSet]]:
    """Group sets under the exercise they reference.

    Groups appear in order of first appearance, and sets keep their
    original relative order inside each group.

    Args:
        sets: Sets of one template or session
        exercises: The exercise catalog, as a list or an id -> Exercise mapping

    Raises:
        KeyError: if a set references an exercise missing from the catalog
    """
    catalog = _as_mapping(exercises)
    grouped: dict[Exercise, list[WorkoutSet]] = {}

    for workout_set in sets:
        try:
            exercise = catalog[workout_set.exercise_id]
        except KeyError:
            raise KeyError(
                f"Set {workout_set.id} references unknown exercise {workout_set.exercise_id}"
            ) from None
        grouped.setdefault(exercise, []).append(workout_set)

    return grouped


def sorted_exercise_keys(grouping: Mapping[Exercise, list[WorkoutSet]]) -> list[Exercise]:
    """Exercises of a grouping sorted by name.

    The sort is stable, so exercises sharing a name stay in grouping order.
    """
    return sorted(grouping, key=lambda exercise: exercise.name)


def grouped_sections(
    sets: Iterable[WorkoutSet],
    exercises: Catalog,
) -> list[tuple[Exercise, list[WorkoutSet]]]:
    """(exercise, sets) sections sorted by exercise name."""
    grouping = group_sets_by_exercise(sets, exercises)
    return [(exercise, grouping[exercise]) for exercise in sorted_exercise_keys(grouping)]
