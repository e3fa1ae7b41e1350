"""In-memory workout store.

The store is the single owner of the exercise catalog, the templates and the
sessions. Presentation code reads copies (queries, snapshots) and changes
state only through the command methods below. Each command runs to
completion in one step: it either applies fully and publishes a new snapshot
to subscribers, or leaves the store untouched and says why in its
StoreResult.
"""

import logging
from datetime import datetime
from typing import Callable, Iterable
from uuid import UUID, uuid4

from ..config import FinishPolicy, StoreConfig
from ..models.exercises import Exercise
from ..models.workout import (
    SetField,
    WorkoutSession,
    WorkoutSet,
    WorkoutTemplate,
    validate_set_value,
)
from ..utils.exercise_utils import find_matching_exercise
from .results import ResultStatus, StoreResult
from .snapshot import StoreSnapshot

logger = logging.getLogger(__name__)

Listener = Callable[[StoreSnapshot], None]


class WorkoutStore:
    """Authoritative in-memory repository of exercises, templates and sessions."""

    def __init__(
        self,
        config: StoreConfig | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self.config = config or StoreConfig()
        self._clock = clock or datetime.now
        self._exercises: list[Exercise] = []
        self._templates: list[WorkoutTemplate] = []
        self._sessions: list[WorkoutSession] = []
        self._issued_ids: set[UUID] = set()
        self._listeners: list[Listener] = []
        self._version = 0

        for name in self.config.seed_exercises:
            exercise = Exercise(name=name, id=self._new_id())
            self._exercises.append(exercise)

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called with a fresh snapshot after each change.

        Each listener gets its own snapshot, so one listener editing it is
        invisible to the next.

        Returns:
            A callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    @property
    def version(self) -> int:
        """Number of mutations applied so far."""
        return self._version

    def _publish(self) -> None:
        self._version += 1
        if not self._listeners:
            return
        for listener in list(self._listeners):
            listener(self.snapshot())

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def snapshot(self) -> StoreSnapshot:
        """Full copy of the current state."""
        return StoreSnapshot(
            version=self._version,
            exercises=tuple(self._exercises),
            templates=tuple(t.copy() for t in self._templates),
            sessions=tuple(s.copy() for s in self._sessions),
        )

    def list_exercises(self) -> list[Exercise]:
        return list(self._exercises)

    def list_templates(self) -> list[WorkoutTemplate]:
        return [t.copy() for t in self._templates]

    def list_sessions(self, template_id: UUID | None = None) -> list[WorkoutSession]:
        """List sessions, optionally only those started from one template."""
        return [
            s.copy()
            for s in self._sessions
            if template_id is None or s.template_id == template_id
        ]

    def get_exercise(self, exercise_id: UUID) -> Exercise | None:
        return self._find_exercise(exercise_id)

    def get_template(self, template_id: UUID) -> WorkoutTemplate | None:
        template = self._find_template(template_id)
        return template.copy() if template else None

    def get_session(self, session_id: UUID) -> WorkoutSession | None:
        session = self._find_session(session_id)
        return session.copy() if session else None

    def find_exercise(self, name: str) -> Exercise | None:
        """Look up a catalog exercise by (approximate) name."""
        return find_matching_exercise(name, self._exercises)

    # ------------------------------------------------------------------
    # Exercise commands
    # ------------------------------------------------------------------

    def add_exercise(self, name: str) -> StoreResult:
        """Add an exercise to the catalog."""
        exercise = Exercise(name=name, id=self._new_id())
        self._exercises.append(exercise)
        logger.debug("Added exercise %s (%s)", exercise.name, exercise.id)
        self._publish()
        return StoreResult.success(exercise.id)

    # ------------------------------------------------------------------
    # Template commands
    # ------------------------------------------------------------------

    def add_template(self, name: str, sets: Iterable[WorkoutSet] = ()) -> StoreResult:
        """Create a template and return its id.

        The name is not validated. Initial sets are copied into the store;
        if any references an unknown exercise nothing is created.
        """
        sets = list(sets)
        for workout_set in sets:
            if self._find_exercise(workout_set.exercise_id) is None:
                return self._not_found(f"Exercise {workout_set.exercise_id} not found")

        template = WorkoutTemplate(name=name, id=self._new_id())
        template.sets = [self._admit_set(s) for s in sets]
        self._templates.append(template)

        logger.debug("Added template %r (%s) with %d set(s)", name, template.id, len(sets))
        self._publish()
        return StoreResult.success(template.id)

    def add_set_to_template(self, template_id: UUID, workout_set: WorkoutSet) -> StoreResult:
        """Append a copy of a set to a template and return the stored set's id."""
        template = self._find_template(template_id)
        if template is None:
            return self._not_found(f"Template {template_id} not found")
        if self._find_exercise(workout_set.exercise_id) is None:
            return self._not_found(f"Exercise {workout_set.exercise_id} not found")

        stored = self._admit_set(workout_set)
        template.sets.append(stored)

        logger.debug("Added set %s to template %s", stored.id, template_id)
        self._publish()
        return StoreResult.success(stored.id)

    def record_template_set_value(
        self,
        template_id: UUID,
        set_id: UUID,
        field: SetField | str,
        value: float | int,
    ) -> StoreResult:
        """Update weight or reps of a template set in place."""
        set_field, value = self._coerce_field(field, value)

        template = self._find_template(template_id)
        if template is None:
            return self._not_found(f"Template {template_id} not found")

        workout_set = template.find_set(set_id)
        if workout_set is None:
            return self._not_found(f"Set {set_id} not found in template {template_id}")

        setattr(workout_set, set_field.value, value)
        logger.debug("Template %s set %s: %s=%s", template_id, set_id, set_field.value, value)
        self._publish()
        return StoreResult.success(value)

    def duplicate_last_template_set(
        self,
        template_id: UUID,
        exercise_id: UUID | None = None,
    ) -> StoreResult:
        """Append a copy of the template's last set (of one exercise, if given)."""
        template = self._find_template(template_id)
        if template is None:
            return self._not_found(f"Template {template_id} not found")

        return self._duplicate_last(template.sets, exercise_id, f"template {template_id}")

    def delete_sets_from_template(self, template_id: UUID, set_ids: Iterable[UUID]) -> StoreResult:
        """Remove sets from a template, keeping the order of the rest."""
        template = self._find_template(template_id)
        if template is None:
            return self._not_found(f"Template {template_id} not found")

        return self._delete_from(template, set_ids, f"template {template_id}")

    def delete_template(self, template_id: UUID) -> StoreResult:
        """Remove a template. Sessions started from it are kept."""
        template = self._find_template(template_id)
        if template is None:
            return self._not_found(f"Template {template_id} not found")

        self._templates.remove(template)
        logger.debug("Deleted template %s", template_id)
        self._publish()
        return StoreResult.success(template_id)

    # ------------------------------------------------------------------
    # Session commands
    # ------------------------------------------------------------------

    def start_session(self, template_id: UUID) -> StoreResult:
        """Start a session from a template and return its id.

        The session gets independent copies of the template's current sets,
        each with a new id and not completed.
        """
        template = self._find_template(template_id)
        if template is None:
            return self._not_found(f"Template {template_id} not found")

        session = WorkoutSession(
            id=self._new_id(),
            template_id=template.id,
            template_name=template.name,
            start_time=self._clock(),
            sets=[self._register(s.duplicate()) for s in template.sets],
        )
        self._sessions.append(session)

        logger.info("Started session %s from template %r", session.id, template.name)
        self._publish()
        return StoreResult.success(session.id)

    def record_set_value(
        self,
        session_id: UUID,
        set_id: UUID,
        field: SetField | str,
        value: float | int,
    ) -> StoreResult:
        """Update weight or reps of a session set in place.

        Raises:
            ValueError: for an unknown field or an invalid value
        """
        set_field, value = self._coerce_field(field, value)

        session, rejected = self._editable_session(session_id)
        if rejected:
            return rejected

        workout_set = session.find_set(set_id)
        if workout_set is None:
            return self._not_found(f"Set {set_id} not found in session {session_id}")

        setattr(workout_set, set_field.value, value)
        logger.debug("Session %s set %s: %s=%s", session_id, set_id, set_field.value, value)
        self._publish()
        return StoreResult.success(value)

    def set_completed(self, session_id: UUID, set_id: UUID, completed: bool = True) -> StoreResult:
        """Mark a session set as done (or not done)."""
        session, rejected = self._editable_session(session_id)
        if rejected:
            return rejected

        workout_set = session.find_set(set_id)
        if workout_set is None:
            return self._not_found(f"Set {set_id} not found in session {session_id}")

        workout_set.completed = completed
        logger.debug("Session %s set %s completed=%s", session_id, set_id, completed)
        self._publish()
        return StoreResult.success(completed)

    def delete_sets(self, session_id: UUID, set_ids: Iterable[UUID]) -> StoreResult:
        """Remove sets from a session, keeping the order of the rest."""
        session, rejected = self._editable_session(session_id)
        if rejected:
            return rejected

        return self._delete_from(session, set_ids, f"session {session_id}")

    def duplicate_last_set(self, session_id: UUID, exercise_id: UUID | None = None) -> StoreResult:
        """Append a copy of the session's last set (of one exercise, if given).

        The copy keeps exercise, weight and reps, gets a new id and is not
        completed. Nothing happens on a session without matching sets.
        """
        session, rejected = self._editable_session(session_id)
        if rejected:
            return rejected

        return self._duplicate_last(session.sets, exercise_id, f"session {session_id}")

    def finish_session(self, session_id: UUID) -> StoreResult:
        """Stamp a session's end time and return it.

        Finishing again re-stamps the end time under FinishPolicy.RESTAMP and
        is a no-op reporting ALREADY_FINISHED under FinishPolicy.KEEP_FIRST.
        The end time never precedes the start time.
        """
        session = self._find_session(session_id)
        if session is None:
            return self._not_found(f"Session {session_id} not found")

        if session.is_finished and self.config.finish_policy is FinishPolicy.KEEP_FIRST:
            logger.debug("Session %s already finished at %s", session_id, session.end_time)
            return StoreResult(
                ResultStatus.ALREADY_FINISHED,
                value=session.end_time,
                message=f"Session {session_id} already finished",
            )

        session.end_time = max(self._clock(), session.start_time)

        logger.info("Finished session %s at %s", session_id, session.end_time)
        self._publish()
        return StoreResult.success(session.end_time)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _new_id(self) -> UUID:
        new_id = uuid4()
        while new_id in self._issued_ids:
            new_id = uuid4()
        self._issued_ids.add(new_id)
        return new_id

    def _register(self, workout_set: WorkoutSet) -> WorkoutSet:
        """Record the id of a freshly created set."""
        if workout_set.id in self._issued_ids:
            workout_set.id = self._new_id()
        else:
            self._issued_ids.add(workout_set.id)
        return workout_set

    def _admit_set(self, workout_set: WorkoutSet) -> WorkoutSet:
        """Copy an outside set into the store, re-identifying it if its id is taken."""
        return self._register(workout_set.copy())

    def _find_exercise(self, exercise_id: UUID) -> Exercise | None:
        return next((e for e in self._exercises if e.id == exercise_id), None)

    def _find_template(self, template_id: UUID) -> WorkoutTemplate | None:
        return next((t for t in self._templates if t.id == template_id), None)

    def _find_session(self, session_id: UUID) -> WorkoutSession | None:
        return next((s for s in self._sessions if s.id == session_id), None)

    def _editable_session(self, session_id: UUID) -> tuple[WorkoutSession | None, StoreResult | None]:
        session = self._find_session(session_id)
        if session is None:
            return None, self._not_found(f"Session {session_id} not found")
        if session.is_finished and self.config.lock_finished_sessions:
            logger.debug("Rejected edit of finished session %s", session_id)
            return session, StoreResult(
                ResultStatus.SESSION_FINISHED,
                message=f"Session {session_id} is finished",
            )
        return session, None

    def _duplicate_last(
        self,
        sets: list[WorkoutSet],
        exercise_id: UUID | None,
        owner: str,
    ) -> StoreResult:
        candidates = [s for s in sets if exercise_id is None or s.exercise_id == exercise_id]
        if not candidates:
            logger.debug("Nothing to duplicate in %s", owner)
            return StoreResult(ResultStatus.EMPTY, message=f"No set to duplicate in {owner}")

        new_set = self._register(candidates[-1].duplicate())
        sets.append(new_set)

        logger.debug("Duplicated set %s as %s in %s", candidates[-1].id, new_set.id, owner)
        self._publish()
        return StoreResult.success(new_set.id)

    def _delete_from(
        self,
        container: WorkoutTemplate | WorkoutSession,
        set_ids: Iterable[UUID],
        owner: str,
    ) -> StoreResult:
        wanted = list(dict.fromkeys(set_ids))
        present = {s.id for s in container.sets}
        removed = [set_id for set_id in wanted if set_id in present]
        missing = tuple(set_id for set_id in wanted if set_id not in present)

        if missing:
            logger.debug("Skipping %d unknown set id(s) in %s", len(missing), owner)
        if not removed:
            return StoreResult.success([], missing=missing)

        doomed = set(removed)
        container.sets = [s for s in container.sets if s.id not in doomed]

        logger.debug("Deleted %d set(s) from %s", len(removed), owner)
        self._publish()
        return StoreResult.success(removed, missing=missing)

    @staticmethod
    def _coerce_field(field: SetField | str, value) -> tuple[SetField, float | int]:
        try:
            set_field = SetField(field)
        except ValueError:
            raise ValueError(f"Unknown set field: {field!r}") from None
        return set_field, validate_set_value(set_field, value)

    @staticmethod
    def _not_found(message: str) -> StoreResult:
        logger.debug(message)
        return StoreResult.not_found(message)
