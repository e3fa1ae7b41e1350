"""CLI commands for liftlog."""

from .demo import demo
from .exercises import exercises
from .shell import shell

__all__ = [
    "demo",
    "exercises",
    "shell",
]
