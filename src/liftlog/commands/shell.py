"""Interactive shell: templates and workouts for the lifetime of the process."""

import click

from ..clients.interactive import InteractiveClient
from ..models.workout import WorkoutSet
from ..store import StoreResult, StoreSnapshot, WorkoutStore
from ..utils.grouping import grouped_sections
from .base import echo_info, echo_success, echo_warning, get_store, render_session, render_template


def set_labels(sets: list[WorkoutSet], exercises) -> dict:
    """Map set ids to labels like 'Squat - Set 2 (100.0 x 5)'."""
    labels = {}
    for exercise, exercise_sets in grouped_sections(sets, exercises):
        for i, s in enumerate(exercise_sets):
            labels[s.id] = f"{exercise.name} - Set {i + 1} ({s.weight:.1f} x {s.reps})"
    return labels


def report(result: StoreResult, success: str) -> None:
    if result:
        echo_success(success)
    else:
        echo_warning(result.message or result.status.value)


class Shell:
    """Menu loop that turns user choices into store commands.

    The shell never keeps store entities between steps: it re-reads the
    snapshot the store publishes after every change.
    """

    def __init__(self, store: WorkoutStore, client: InteractiveClient | None = None):
        self.store = store
        self.client = client or InteractiveClient()
        self.snapshot: StoreSnapshot = store.snapshot()
        self.unit = store.config.weight_unit
        self._unsubscribe = store.subscribe(self._on_change)

    def _on_change(self, snapshot: StoreSnapshot) -> None:
        self.snapshot = snapshot

    def run(self) -> None:
        try:
            while True:
                action = self.client.choose_action()
                if action is None or action == "quit":
                    break
                getattr(self, f"do_{action}")()
        finally:
            self._unsubscribe()

    # Templates

    def do_new_template(self) -> None:
        name = self.client.ask_template_name()
        if name is None:
            return
        report(self.store.add_template(name.strip()), f"Created template '{name.strip()}'")

    def do_add_template_set(self) -> None:
        template = self.client.choose_template(list(self.snapshot.templates))
        if template is None:
            echo_info("No template selected")
            return
        exercise = self.client.choose_exercise(list(self.snapshot.exercises))
        if exercise is None:
            return
        weight = self.client.ask_weight(self.unit)
        reps = self.client.ask_reps()
        if weight is None or reps is None:
            return

        new_set = WorkoutSet(exercise_id=exercise.id, weight=weight, reps=reps)
        report(self.store.add_set_to_template(template.id, new_set), f"Added {exercise.name} set")
        self._show_template(template.id)

    def do_edit_template_set(self) -> None:
        template = self.client.choose_template(list(self.snapshot.templates))
        if template is None:
            echo_info("No template selected")
            return
        labels = set_labels(template.sets, self.snapshot.exercises)
        chosen = self.client.choose_set(template.sets, labels)
        if chosen is None:
            return
        set_field = self.client.choose_field()
        if set_field is None:
            return
        value = self.client.ask_value(set_field, self.unit)
        if value is None:
            return

        result = self.store.record_template_set_value(template.id, chosen.id, set_field, value)
        report(result, f"Updated {set_field.value}")
        self._show_template(template.id)

    def do_delete_template_sets(self) -> None:
        template = self.client.choose_template(list(self.snapshot.templates))
        if template is None:
            echo_info("No template selected")
            return
        labels = set_labels(template.sets, self.snapshot.exercises)
        chosen = self.client.choose_sets(template.sets, labels)
        if not chosen:
            return

        result = self.store.delete_sets_from_template(template.id, [s.id for s in chosen])
        report(result, f"Deleted {len(chosen)} set(s)")
        self._show_template(template.id)

    def do_delete_template(self) -> None:
        template = self.client.choose_template(list(self.snapshot.templates))
        if template is None:
            echo_info("No template selected")
            return
        report(self.store.delete_template(template.id), f"Deleted template '{template.name}'")

    # Workouts

    def do_start_session(self) -> None:
        template = self.client.choose_template(list(self.snapshot.templates))
        if template is None:
            echo_info("No template selected")
            return
        result = self.store.start_session(template.id)
        report(result, f"Started '{template.name}'")
        if result:
            self._show_session(result.value)

    def do_record_set(self) -> None:
        session = self._choose_session()
        if session is None:
            return
        labels = set_labels(session.sets, self.snapshot.exercises)
        chosen = self.client.choose_set(session.sets, labels)
        if chosen is None:
            return
        set_field = self.client.choose_field()
        if set_field is None:
            return
        value = self.client.ask_value(set_field, self.unit)
        if value is None:
            return

        result = self.store.record_set_value(session.id, chosen.id, set_field, value)
        report(result, f"Recorded {set_field.value}")
        self._show_session(session.id)

    def do_complete_set(self) -> None:
        session = self._choose_session()
        if session is None:
            return
        labels = set_labels(session.sets, self.snapshot.exercises)
        chosen = self.client.choose_set(session.sets, labels)
        if chosen is None:
            return

        result = self.store.set_completed(session.id, chosen.id, not chosen.completed)
        report(result, "Set done" if not chosen.completed else "Set reopened")
        self._show_session(session.id)

    def do_duplicate_set(self) -> None:
        session = self._choose_session()
        if session is None:
            return
        if not session.sets:
            echo_info("This workout has no sets to repeat")
            return
        exercises = [e for e, _ in grouped_sections(session.sets, self.snapshot.exercises)]
        exercise = self.client.choose_exercise(exercises)
        if exercise is None:
            return

        result = self.store.duplicate_last_set(session.id, exercise.id)
        report(result, "Added set")
        self._show_session(session.id)

    def do_delete_session_sets(self) -> None:
        session = self._choose_session()
        if session is None:
            return
        labels = set_labels(session.sets, self.snapshot.exercises)
        chosen = self.client.choose_sets(session.sets, labels)
        if not chosen:
            return

        result = self.store.delete_sets(session.id, [s.id for s in chosen])
        report(result, f"Deleted {len(chosen)} set(s)")
        self._show_session(session.id)

    def do_finish_session(self) -> None:
        session = self._choose_session()
        if session is None:
            return
        result = self.store.finish_session(session.id)
        report(result, f"Finished '{session.template_name}'")

    def do_show(self) -> None:
        if not self.snapshot.templates and not self.snapshot.sessions:
            echo_info("Nothing yet. Create a template first.")
            return
        for template in self.snapshot.templates:
            self._show_template(template.id)
        for session in self.snapshot.sessions:
            self._show_session(session.id)

    # Helpers

    def _choose_session(self):
        session = self.client.choose_session(list(self.snapshot.sessions))
        if session is None:
            echo_info("No workout selected")
        return session

    def _show_template(self, template_id) -> None:
        template = self.snapshot.get_template(template_id)
        if template is not None:
            click.echo(render_template(template, self.snapshot.exercises, self.unit))

    def _show_session(self, session_id) -> None:
        session = self.snapshot.get_session(session_id)
        if session is not None:
            click.echo(render_session(session, self.snapshot.exercises, self.unit))


@click.command()
@click.pass_context
def shell(ctx):
    """Create templates and log workouts interactively.

    Nothing is saved: everything lives until the shell exits.
    """
    store = get_store(ctx)
    echo_info("Exercises: " + ", ".join(e.name for e in store.list_exercises()))
    Shell(store).run()
    echo_info("Bye")
