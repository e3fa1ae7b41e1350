"""Workout sets, templates and sessions."""

import math
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from uuid import UUID, uuid4


class SetField(str, Enum):
    """Editable numeric fields of a set."""

    WEIGHT = "weight"
    REPS = "reps"


class SessionStatus(str, Enum):
    """Session lifecycle."""

    ACTIVE = "active"
    FINISHED = "finished"


def validate_set_value(set_field: SetField, value) -> float | int:
    """Check a weight/reps value and return it in its stored type.

    Raises:
        ValueError: if the value is negative, not finite or of the wrong type
    """
    if isinstance(value, bool):
        raise ValueError(f"{set_field.value} must be a number, got {value!r}")

    if set_field is SetField.REPS:
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        if not isinstance(value, int):
            raise ValueError(f"reps must be an integer, got {value!r}")
        if value < 0:
            raise ValueError(f"reps must be >= 0, got {value}")
        return value

    if not isinstance(value, (int, float)):
        raise ValueError(f"weight must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ValueError(f"weight must be finite, got {value}")
    if value < 0:
        raise ValueError(f"weight must be >= 0, got {value}")
    return float(value)


@dataclass(eq=False)
class WorkoutSet:
    """One planned or performed set of an exercise."""

    exercise_id: UUID
    weight: float = 0.0
    reps: int = 0
    completed: bool = False
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self):
        self.weight = validate_set_value(SetField.WEIGHT, self.weight)
        self.reps = validate_set_value(SetField.REPS, self.reps)

    def __eq__(self, other) -> bool:
        if not isinstance(other, WorkoutSet):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def same_values(self, other: "WorkoutSet") -> bool:
        """Compare exercise, weight and reps, ignoring identity."""
        return (
            self.exercise_id == other.exercise_id
            and self.weight == other.weight
            and self.reps == other.reps
        )

    def duplicate(self) -> "WorkoutSet":
        """New set with a fresh id copying exercise, weight and reps."""
        return WorkoutSet(
            exercise_id=self.exercise_id,
            weight=self.weight,
            reps=self.reps,
        )

    def copy(self) -> "WorkoutSet":
        """Exact copy, id included."""
        return replace(self)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": str(self.id),
            "exercise_id": str(self.exercise_id),
            "weight": self.weight,
            "reps": self.reps,
            "completed": self.completed,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WorkoutSet":
        """Create from dictionary."""
        return cls(
            id=UUID(data["id"]),
            exercise_id=UUID(data["exercise_id"]),
            weight=data.get("weight", 0.0),
            reps=data.get("reps", 0),
            completed=data.get("completed", False),
        )


@dataclass(eq=False)
class WorkoutTemplate:
    """A reusable, named plan made of an ordered list of sets."""

    name: str
    sets: list[WorkoutSet] = field(default_factory=list)
    id: UUID = field(default_factory=uuid4)

    def __eq__(self, other) -> bool:
        if not isinstance(other, WorkoutTemplate):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def find_set(self, set_id: UUID) -> WorkoutSet | None:
        """Find a set by id."""
        return next((s for s in self.sets if s.id == set_id), None)

    def copy(self) -> "WorkoutTemplate":
        """Deep copy, ids included."""
        return WorkoutTemplate(
            id=self.id,
            name=self.name,
            sets=[s.copy() for s in self.sets],
        )

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": str(self.id),
            "name": self.name,
            "sets": [s.to_dict() for s in self.sets],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WorkoutTemplate":
        """Create from dictionary."""
        return cls(
            id=UUID(data["id"]),
            name=data["name"],
            sets=[WorkoutSet.from_dict(s) for s in data.get("sets", [])],
        )


@dataclass(eq=False)
class WorkoutSession:
    """One timed performance of a template.

    The sets are independent copies of the template's sets at start time,
    and ``template_name`` keeps the name the template had back then.
    """

    template_id: UUID
    template_name: str
    start_time: datetime
    sets: list[WorkoutSet] = field(default_factory=list)
    end_time: datetime | None = None
    id: UUID = field(default_factory=uuid4)

    def __eq__(self, other) -> bool:
        if not isinstance(other, WorkoutSession):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def status(self) -> SessionStatus:
        """Current lifecycle state."""
        if self.end_time is None:
            return SessionStatus.ACTIVE
        return SessionStatus.FINISHED

    @property
    def is_finished(self) -> bool:
        return self.end_time is not None

    def find_set(self, set_id: UUID) -> WorkoutSet | None:
        """Find a set by id."""
        return next((s for s in self.sets if s.id == set_id), None)

    def get_status_display(self) -> str:
        """Get a human-readable status string."""
        if self.end_time is None:
            return "In Progress"
        return f"Finished: {self.end_time.strftime('%H:%M')}"

    def copy(self) -> "WorkoutSession":
        """Deep copy, ids included."""
        return WorkoutSession(
            id=self.id,
            template_id=self.template_id,
            template_name=self.template_name,
            start_time=self.start_time,
            end_time=self.end_time,
            sets=[s.copy() for s in self.sets],
        )

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": str(self.id),
            "template_id": str(self.template_id),
            "template_name": self.template_name,
            "sets": [s.to_dict() for s in self.sets],
            "start_time": self.start_time.isoformat(),
            "end_time": self.end_time.isoformat() if self.end_time else None,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WorkoutSession":
        """Create from dictionary."""
        end_time = None
        if data.get("end_time"):
            end_time = datetime.fromisoformat(data["end_time"])

        return cls(
            id=UUID(data["id"]),
            template_id=UUID(data["template_id"]),
            template_name=data.get("template_name", ""),
            start_time=datetime.fromisoformat(data["start_time"]),
            end_time=end_time,
            sets=[WorkoutSet.from_dict(s) for s in data.get("sets", [])],
        )
