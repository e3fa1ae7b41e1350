"""Pytest configuration and fixtures."""

from datetime import datetime, timedelta

import pytest

from liftlog.config import StoreConfig
from liftlog.models.workout import WorkoutSet
from liftlog.store import WorkoutStore


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now += timedelta(**kwargs)
        return self.now


@pytest.fixture
def clock():
    """A controllable clock starting at a fixed time."""
    return FakeClock(datetime(2024, 5, 1, 18, 0, 0))


@pytest.fixture
def store(clock):
    """A store with the default catalog and the fake clock."""
    return WorkoutStore(StoreConfig(), clock=clock)


@pytest.fixture
def bench(store):
    return store.find_exercise("Bench Press")


@pytest.fixture
def squat(store):
    return store.find_exercise("Squat")


@pytest.fixture
def push_day(store, bench, squat):
    """Template id of a 'Push Day' with two bench sets and one squat set."""
    template_id = store.add_template("Push Day").unwrap()
    store.add_set_to_template(template_id, WorkoutSet(exercise_id=bench.id, weight=60, reps=5))
    store.add_set_to_template(template_id, WorkoutSet(exercise_id=bench.id, weight=65, reps=3))
    store.add_set_to_template(template_id, WorkoutSet(exercise_id=squat.id, weight=100, reps=5))
    return template_id
