"""Immutable views of store state."""

from dataclasses import dataclass
from uuid import UUID

from ..models.exercises import Exercise
from ..models.workout import WorkoutSession, WorkoutTemplate


@dataclass(frozen=True)
class StoreSnapshot:
    """The store's full state at one point in time.

    Templates and sessions are private copies: editing them never reaches
    the store.
    """

    version: int
    exercises: tuple[Exercise, ...]
    templates: tuple[WorkoutTemplate, ...]
    sessions: tuple[WorkoutSession, ...]

    def exercise_catalog(self) -> dict[UUID, Exercise]:
        """Map exercise ids to exercises."""
        return {exercise.id: exercise for exercise in self.exercises}

    def get_template(self, template_id: UUID) -> WorkoutTemplate | None:
        return next((t for t in self.templates if t.id == template_id), None)

    def get_session(self, session_id: UUID) -> WorkoutSession | None:
        return next((s for s in self.sessions if s.id == session_id), None)

    def sessions_for_template(self, template_id: UUID) -> list[WorkoutSession]:
        return [s for s in self.sessions if s.template_id == template_id]

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "version": self.version,
            "exercises": [e.to_dict() for e in self.exercises],
            "templates": [t.to_dict() for t in self.templates],
            "sessions": [s.to_dict() for s in self.sessions],
        }
