"""Utilities for exercise name normalization and matching."""

import re
from difflib import SequenceMatcher
from typing import Iterable

from ..models.exercises import Exercise

# Common gym shorthand
ABBREVIATIONS = {
    "bb": "barbell",
    "db": "dumbbell",
    "kb": "kettlebell",
    "ohp": "overhead press",
    "rdl": "romanian deadlift",
    "bss": "bulgarian split squat",
}


def normalize_exercise_name(name: str) -> str:
    """Normalize an exercise name for comparison.

    Converts to lowercase, removes extra whitespace, and expands common abbreviations.
    """
    normalized = name.lower().strip()
    normalized = re.sub(r"\s+", " ", normalized)

    if normalized in ABBREVIATIONS:
        return ABBREVIATIONS[normalized]

    for abbrev, full in ABBREVIATIONS.items():
        normalized = re.sub(rf"\b{abbrev}\b", full, normalized)

    return normalized


def find_matching_exercise(
    name: str,
    exercises: Iterable[Exercise],
    threshold: float = 0.8,
) -> Exercise | None:
    """Find the best matching exercise in a catalog.

    Args:
        name: The exercise name to match
        exercises: Catalog to search
        threshold: Minimum similarity ratio (0-1) to consider a match

    Returns:
        The first exact (normalized) match, else the closest exercise at or
        above the threshold, else None
    """
    normalized_name = normalize_exercise_name(name)

    best_match: Exercise | None = None
    best_score = 0.0

    for exercise in exercises:
        candidate = normalize_exercise_name(exercise.name)
        if candidate == normalized_name:
            return exercise

        score = SequenceMatcher(None, normalized_name, candidate).ratio()
        if score > best_score:
            best_score = score
            best_match = exercise

    if best_score >= threshold:
        return best_match

    return None
