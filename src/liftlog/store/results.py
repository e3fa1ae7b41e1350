"""Typed outcomes of store commands."""

from dataclasses import dataclass
from enum import Enum
from typing import Any
from uuid import UUID


class ResultStatus(str, Enum):
    """Outcome of a store command."""

    OK = "ok"
    NOT_FOUND = "not_found"
    EMPTY = "empty"
    ALREADY_FINISHED = "already_finished"
    SESSION_FINISHED = "session_finished"


class NotFoundError(LookupError):
    """Raised by StoreResult.unwrap() for a reference that does not exist."""


class CommandRejectedError(RuntimeError):
    """Raised by StoreResult.unwrap() for any other no-op outcome."""


@dataclass(frozen=True)
class StoreResult:
    """Result of a store command.

    Every outcome other than OK means the store was left untouched. The
    result is truthy only when the command applied.
    """

    status: ResultStatus
    value: Any = None
    missing: tuple[UUID, ...] = ()
    message: str = ""

    def __bool__(self) -> bool:
        return self.status is ResultStatus.OK

    @property
    def ok(self) -> bool:
        return self.status is ResultStatus.OK

    def unwrap(self) -> Any:
        """Return the value, raising if the command did not apply."""
        if self.status is ResultStatus.NOT_FOUND:
            raise NotFoundError(self.message)
        if self.status is not ResultStatus.OK:
            raise CommandRejectedError(self.message or self.status.value)
        return self.value

    @classmethod
    def success(cls, value: Any = None, missing: tuple[UUID, ...] = ()) -> "StoreResult":
        return cls(ResultStatus.OK, value=value, missing=tuple(missing))

    @classmethod
    def not_found(cls, message: str) -> "StoreResult":
        return cls(ResultStatus.NOT_FOUND, message=message)
