"""Demo command: run a sample workout through a fresh store."""

import json

import click

from ..models.workout import SetField, WorkoutSet
from .base import echo_success, get_store, render_session, render_template


@click.command()
@click.option("--json", "as_json", is_flag=True, help="Print the final snapshot as JSON")
@click.pass_context
def demo(ctx, as_json: bool):
    """Build a 'Push Day' template, perform it once and show the result.

    The template keeps its planned values while the session records what
    was actually lifted.
    """
    store = get_store(ctx)
    unit = store.config.weight_unit

    bench = store.find_exercise("Bench Press")
    if bench is None:
        bench = store.get_exercise(store.add_exercise("Bench Press").unwrap())
    squat = store.find_exercise("Squat")
    if squat is None:
        squat = store.get_exercise(store.add_exercise("Squat").unwrap())

    template_id = store.add_template("Push Day").unwrap()
    store.add_set_to_template(template_id, WorkoutSet(exercise_id=bench.id, weight=60, reps=5))
    store.add_set_to_template(template_id, WorkoutSet(exercise_id=squat.id, weight=100, reps=5))

    session_id = store.start_session(template_id).unwrap()
    first_set = store.get_session(session_id).sets[0]
    store.record_set_value(session_id, first_set.id, SetField.REPS, 8)
    store.set_completed(session_id, first_set.id)
    store.duplicate_last_set(session_id, exercise_id=bench.id)
    store.finish_session(session_id)

    if as_json:
        click.echo(json.dumps(store.snapshot().to_dict(), indent=2))
        return

    snapshot = store.snapshot()
    click.echo()
    click.echo(render_template(snapshot.get_template(template_id), snapshot.exercises, unit))
    click.echo()
    click.echo(render_session(snapshot.get_session(session_id), snapshot.exercises, unit))
    click.echo()
    echo_success(f"Demo complete ({snapshot.version} store updates)")
