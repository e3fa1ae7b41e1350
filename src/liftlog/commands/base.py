"""Shared CLI utilities."""

import logging

import click

from ..config import StoreConfig
from ..models.exercises import Exercise
from ..models.workout import WorkoutSession, WorkoutSet, WorkoutTemplate
from ..store import WorkoutStore
from ..utils.grouping import grouped_sections


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr, at DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def get_store(ctx: click.Context) -> WorkoutStore:
    """Get the store owned by the root command, creating it on first use."""
    obj = ctx.ensure_object(dict)
    if "store" not in obj:
        obj["store"] = WorkoutStore(obj.get("config") or StoreConfig())
    return obj["store"]


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = ["".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers))]
    lines.append("".join("-" * w + " " * padding for w in widths))
    for row in rows:
        lines.append("".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row)))

    return "\n".join(line.rstrip() for line in lines)


def format_set(index: int, workout_set: WorkoutSet, unit: str = "kg") -> str:
    """One line for a set, numbered from 1 within its exercise."""
    check = "[x]" if workout_set.completed else "[ ]"
    return f"  Set {index + 1}  {workout_set.weight:.1f} {unit} x {workout_set.reps} reps  {check}"


def render_sets(sets: list[WorkoutSet], exercises: list[Exercise], unit: str = "kg") -> list[str]:
    """Lines for sets grouped under their exercise, sorted by exercise name."""
    lines = []
    for exercise, exercise_sets in grouped_sections(sets, exercises):
        lines.append(exercise.name)
        lines.extend(format_set(i, s, unit) for i, s in enumerate(exercise_sets))
    return lines


def render_template(template: WorkoutTemplate, exercises: list[Exercise], unit: str = "kg") -> str:
    """Template heading plus its sets by exercise."""
    lines = [f"Template: {template.name or '(unnamed)'}"]
    if template.sets:
        lines.extend(render_sets(template.sets, exercises, unit))
    else:
        lines.append("  This template has no exercises yet.")
    return "\n".join(lines)


def render_session(session: WorkoutSession, exercises: list[Exercise], unit: str = "kg") -> str:
    """Session heading, status and its sets by exercise."""
    lines = [
        f"Session: {session.template_name or '(unnamed)'} "
        f"(started {session.start_time.strftime('%H:%M')}, {session.get_status_display()})"
    ]
    if session.sets:
        lines.extend(render_sets(session.sets, exercises, unit))
    else:
        lines.append("  No sets.")
    return "\n".join(lines)
