"""Interactive prompts for the liftlog shell."""

import math

import questionary
from questionary import Style

from ...models.exercises import Exercise
from ...models.workout import SetField, WorkoutSession, WorkoutSet, WorkoutTemplate

# Custom style for prompts
custom_style = Style(
    [
        ("qmark", "fg:#673ab7 bold"),
        ("question", "bold"),
        ("answer", "fg:#f44336 bold"),
        ("pointer", "fg:#673ab7 bold"),
        ("highlighted", "fg:#673ab7 bold"),
        ("selected", "fg:#cc5454"),
        ("separator", "fg:#cc5454"),
        ("instruction", ""),
        ("text", ""),
    ]
)

# (value, label) pairs for the main menu
MENU_ACTIONS = [
    ("new_template", "New template"),
    ("add_template_set", "Add set to template"),
    ("edit_template_set", "Edit template set"),
    ("delete_template_sets", "Delete template sets"),
    ("delete_template", "Delete template"),
    ("start_session", "Start workout"),
    ("record_set", "Record weight/reps"),
    ("complete_set", "Mark set done"),
    ("duplicate_set", "Add set (repeat last)"),
    ("delete_session_sets", "Delete workout sets"),
    ("finish_session", "Finish workout"),
    ("show", "Show templates and workouts"),
    ("quit", "Quit"),
]


def parse_number(text: str | None, integer: bool = False) -> float | int | None:
    """Parse user input as a finite, non-negative number, or None if it is not one."""
    if text is None:
        return None
    try:
        value = int(text) if integer else float(text)
    except (ValueError, TypeError):
        return None
    if not math.isfinite(value) or value < 0:
        return None
    return value


class InteractiveClient:
    """Questionary front end used by the shell command.

    Every method returns None when the user cancels (Ctrl-C) or picks from
    an empty list.
    """

    def choose_action(self) -> str | None:
        return questionary.select(
            "What next?",
            choices=[questionary.Choice(label, value) for value, label in MENU_ACTIONS],
            style=custom_style,
        ).ask()

    def ask_template_name(self) -> str | None:
        return questionary.text(
            "Template name:",
            validate=lambda text: bool(text.strip()) or "Enter a name",
            style=custom_style,
        ).ask()

    def choose_template(self, templates: list[WorkoutTemplate]) -> WorkoutTemplate | None:
        if not templates:
            return None
        return questionary.select(
            "Template:",
            choices=[
                questionary.Choice(f"{t.name} ({len(t.sets)} sets)", t) for t in templates
            ],
            style=custom_style,
        ).ask()

    def choose_session(self, sessions: list[WorkoutSession]) -> WorkoutSession | None:
        if not sessions:
            return None
        return questionary.select(
            "Workout:",
            choices=[
                questionary.Choice(
                    f"{s.template_name} {s.start_time.strftime('%H:%M')} - {s.get_status_display()}",
                    s,
                )
                for s in sessions
            ],
            style=custom_style,
        ).ask()

    def choose_exercise(self, exercises: list[Exercise]) -> Exercise | None:
        if not exercises:
            return None
        return questionary.select(
            "Exercise:",
            choices=[questionary.Choice(e.name, e) for e in exercises],
            style=custom_style,
        ).ask()

    def choose_set(self, sets: list[WorkoutSet], labels: dict) -> WorkoutSet | None:
        if not sets:
            return None
        return questionary.select(
            "Set:",
            choices=[questionary.Choice(labels[s.id], s) for s in sets],
            style=custom_style,
        ).ask()

    def choose_sets(self, sets: list[WorkoutSet], labels: dict) -> list[WorkoutSet] | None:
        if not sets:
            return None
        return questionary.checkbox(
            "Sets to delete:",
            choices=[questionary.Choice(labels[s.id], s) for s in sets],
            style=custom_style,
        ).ask()

    def choose_field(self) -> SetField | None:
        return questionary.select(
            "Field:",
            choices=[
                questionary.Choice("Weight", SetField.WEIGHT),
                questionary.Choice("Reps", SetField.REPS),
            ],
            style=custom_style,
        ).ask()

    def ask_value(self, set_field: SetField, unit: str = "kg") -> float | int | None:
        if set_field is SetField.WEIGHT:
            return self.ask_weight(unit)
        return self.ask_reps()

    def ask_weight(self, unit: str = "kg") -> float | None:
        text = questionary.text(
            f"Weight ({unit}):",
            validate=lambda t: parse_number(t) is not None or "Enter a number >= 0",
            style=custom_style,
        ).ask()
        return parse_number(text)

    def ask_reps(self) -> int | None:
        text = questionary.text(
            "Reps:",
            validate=lambda t: parse_number(t, integer=True) is not None or "Enter a whole number >= 0",
            style=custom_style,
        ).ask()
        return parse_number(text, integer=True)
