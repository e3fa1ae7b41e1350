"""Tests for the CLI and the interactive shell."""

import json

import pytest
from click.testing import CliRunner

from liftlog.cli import main
from liftlog.clients.interactive import parse_number
from liftlog.commands.shell import Shell, set_labels
from liftlog.models.workout import SetField


@pytest.fixture
def runner():
    return CliRunner()


class TestExercisesCommand:
    """Tests for `liftlog exercises`."""

    def test_lists_catalog(self, runner):
        """Test listing the default catalog."""
        result = runner.invoke(main, ["exercises"], env={})
        assert result.exit_code == 0
        assert "Bench Press" in result.output
        assert "Total: 3 exercise(s)" in result.output

    def test_catalog_from_env(self, runner):
        """Seed exercises come from LIFTLOG_SEED_EXERCISES."""
        result = runner.invoke(main, ["exercises"], env={"LIFTLOG_SEED_EXERCISES": "Row,Dip"})
        assert result.exit_code == 0
        assert "Row" in result.output
        assert "Total: 2 exercise(s)" in result.output

    def test_search(self, runner):
        """Test exercise search."""
        result = runner.invoke(main, ["exercises", "--search", "squat"])
        assert result.exit_code == 0
        assert result.output.startswith("Squat")

    def test_search_no_match(self, runner):
        """An unmatched search exits with status 1."""
        result = runner.invoke(main, ["exercises", "--search", "Zercher Carry"])
        assert result.exit_code == 1
        assert "No exercise matches" in result.output

    def test_invalid_config(self, runner):
        """Bad configuration is reported as a usage error."""
        result = runner.invoke(main, ["exercises"], env={"LIFTLOG_WEIGHT_UNIT": "stone"})
        assert result.exit_code != 0
        assert "Invalid configuration" in result.output


class TestDemoCommand:
    """Tests for `liftlog demo`."""

    def test_text_output(self, runner):
        """Test the text rendering of the demo."""
        result = runner.invoke(main, ["demo"])
        assert result.exit_code == 0
        assert "Template: Push Day" in result.output
        assert "Session: Push Day" in result.output
        assert "Set 1  60.0 kg x 5 reps" in result.output
        assert "Set 1  60.0 kg x 8 reps  [x]" in result.output
        assert "Demo complete" in result.output

    def test_json_output(self, runner):
        """Test the demo's JSON output."""
        result = runner.invoke(main, ["demo", "--json"])
        assert result.exit_code == 0

        data = json.loads(result.output)
        template = data["templates"][0]
        session = data["sessions"][0]

        assert template["name"] == "Push Day"
        assert template["sets"][0]["reps"] == 5
        assert session["status"] == "finished"
        assert session["sets"][0]["reps"] == 8
        assert len(session["sets"]) == 3

    def test_seed_without_bench(self, runner):
        """Demo still runs when the catalog lacks a bench press."""
        result = runner.invoke(main, ["demo"], env={"LIFTLOG_SEED_EXERCISES": "Row"})
        assert result.exit_code == 0
        assert "Bench Press" in result.output


class ScriptedClient:
    """Stands in for InteractiveClient, answering from a script."""

    def __init__(self, actions, answers=None):
        self.actions = list(actions)
        self.answers = answers or {}

    def choose_action(self):
        return self.actions.pop(0) if self.actions else None

    def ask_template_name(self):
        return self.answers.get("name", "Push Day")

    def choose_template(self, templates):
        return templates[0] if templates else None

    def choose_session(self, sessions):
        return sessions[-1] if sessions else None

    def choose_exercise(self, exercises):
        wanted = self.answers.get("exercise")
        return next((e for e in exercises if e.name == wanted), exercises[0] if exercises else None)

    def choose_set(self, sets, labels):
        return sets[0] if sets else None

    def choose_sets(self, sets, labels):
        return sets[:1]

    def choose_field(self):
        return self.answers.get("field", SetField.REPS)

    def ask_value(self, set_field, unit="kg"):
        return self.answers.get("value", 8)

    def ask_weight(self, unit="kg"):
        return self.answers.get("weight", 60.0)

    def ask_reps(self):
        return self.answers.get("reps", 5)


class TestShell:
    """Tests for the interactive shell loop."""

    def test_full_workout(self, store):
        """Build a template and log a whole workout through the shell."""
        client = ScriptedClient(
            [
                "new_template",
                "add_template_set",
                "add_template_set",
                "start_session",
                "record_set",
                "complete_set",
                "duplicate_set",
                "finish_session",
                "show",
                "quit",
            ],
            {"exercise": "Bench Press"},
        )
        Shell(store, client).run()

        template = store.list_templates()[0]
        session = store.list_sessions()[0]

        assert template.name == "Push Day"
        assert [s.reps for s in template.sets] == [5, 5]
        assert session.is_finished
        assert session.sets[0].reps == 8
        assert session.sets[0].completed is True
        assert len(session.sets) == 3

    def test_delete_sets(self, store):
        """Test deleting template sets."""
        client = ScriptedClient(
            ["new_template", "add_template_set", "add_template_set", "delete_template_sets", "quit"],
            {"reps": 3},
        )
        Shell(store, client).run()
        assert len(store.list_templates()[0].sets) == 1

    def test_nothing_selected(self, store):
        """Actions with nothing to pick are skipped."""
        Shell(store, ScriptedClient(["start_session", "record_set", "show"])).run()
        assert store.list_sessions() == []

    def test_cancel_duplicate_set(self, store, push_day):
        """Cancelling the exercise prompt adds no set."""

        class CancellingClient(ScriptedClient):
            def choose_exercise(self, exercises):
                return None

        Shell(store, CancellingClient(["start_session", "duplicate_set", "quit"])).run()

        session = store.list_sessions()[0]
        assert len(session.sets) == 3

    def test_unsubscribes_on_exit(self, store):
        """The shell stops listening once it exits."""
        shell = Shell(store, ScriptedClient([]))
        shell.run()
        version = shell.snapshot.version

        store.add_template("Later")
        assert shell.snapshot.version == version

    def test_set_labels(self, store, push_day):
        """Test set labels."""
        template = store.get_template(push_day)
        labels = set_labels(template.sets, store.list_exercises())
        assert labels[template.sets[1].id] == "Bench Press - Set 2 (65.0 x 3)"
        assert labels[template.sets[2].id] == "Squat - Set 1 (100.0 x 5)"


class TestParseNumber:
    """Tests for parse_number."""

    def test_valid(self):
        """Test valid input."""
        assert parse_number("62.5") == 62.5
        assert parse_number("8", integer=True) == 8

    def test_invalid(self):
        """Test invalid input."""
        assert parse_number("abc") is None
        assert parse_number("-1") is None
        assert parse_number("2.5", integer=True) is None
        assert parse_number(None) is None

    def test_non_finite(self):
        """Test that nan and inf are not accepted as weights."""
        assert parse_number("nan") is None
        assert parse_number("inf") is None
        assert parse_number("-inf") is None
