"""Store configuration."""

import os
from dataclasses import dataclass
from enum import Enum

from .models.exercises import DEFAULT_EXERCISE_NAMES

ENV_PREFIX = "LIFTLOG_"


class FinishPolicy(str, Enum):
    """What finishing an already finished session does."""

    RESTAMP = "restamp"  # end_time moves to the latest finish
    KEEP_FIRST = "keep_first"  # first end_time wins, later finishes are no-ops


def _parse_bool(value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in ("1", "true", "yes", "on"):
        return True
    if normalized in ("0", "false", "no", "off", ""):
        return False
    raise ValueError(f"Cannot parse boolean: {value}")


@dataclass
class StoreConfig:
    """Configuration for a WorkoutStore."""

    seed_exercises: tuple[str, ...] = DEFAULT_EXERCISE_NAMES
    finish_policy: FinishPolicy = FinishPolicy.RESTAMP
    lock_finished_sessions: bool = False  # reject set edits on finished sessions
    weight_unit: str = "kg"  # display only

    def __post_init__(self):
        self.seed_exercises = tuple(self.seed_exercises)
        self.finish_policy = FinishPolicy(self.finish_policy)
        if self.weight_unit not in ("kg", "lb"):
            raise ValueError(f"weight_unit must be 'kg' or 'lb', got {self.weight_unit!r}")

    @classmethod
    def from_env(cls, environ: dict | None = None) -> "StoreConfig":
        """Build a config from LIFTLOG_* environment variables.

        Unset variables keep their defaults.
        """
        if environ is None:
            environ = os.environ

        kwargs = {}

        seeds = environ.get(f"{ENV_PREFIX}SEED_EXERCISES")
        if seeds is not None:
            kwargs["seed_exercises"] = tuple(
                name.strip() for name in seeds.split(",") if name.strip()
            )

        policy = environ.get(f"{ENV_PREFIX}FINISH_POLICY")
        if policy:
            kwargs["finish_policy"] = FinishPolicy(policy.strip().lower())

        lock = environ.get(f"{ENV_PREFIX}LOCK_FINISHED")
        if lock is not None:
            kwargs["lock_finished_sessions"] = _parse_bool(lock)

        unit = environ.get(f"{ENV_PREFIX}WEIGHT_UNIT")
        if unit:
            kwargs["weight_unit"] = unit.strip().lower()

        return cls(**kwargs)
