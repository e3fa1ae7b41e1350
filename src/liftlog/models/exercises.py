"""Exercise definitions."""

from dataclasses import dataclass, field
from uuid import UUID, uuid4

# Catalog a fresh store starts with
DEFAULT_EXERCISE_NAMES: tuple[str, ...] = ("Bench Press", "Squat", "Deadlift")


@dataclass(frozen=True)
class Exercise:
    """A named movement type referenced by sets.

    Identity is the id: two exercises with the same name are different
    entities unless they share an id.
    """

    name: str = field(compare=False)
    id: UUID = field(default_factory=uuid4)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"id": str(self.id), "name": self.name}

    @classmethod
    def from_dict(cls, data: dict) -> "Exercise":
        """Create from dictionary."""
        return cls(id=UUID(data["id"]), name=data["name"])


def build_catalog(names: tuple[str, ...] | list[str] = DEFAULT_EXERCISE_NAMES) -> list[Exercise]:
    """Create one exercise per name, in order."""
    return [Exercise(name=name) for name in names]
