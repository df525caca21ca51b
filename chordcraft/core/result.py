"""
Tagged results for component boundaries.

Every caller-visible operation returns either ``Ok(value)`` or
``Err(kind, message)``. Callers branch on ``isinstance`` (or the
``ok`` property); nothing past an adapter boundary raises for a
failure the caller could correct.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Failure categories shared by all components."""
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    OUT_OF_RANGE = "out_of_range"
    INVALID_ARGUMENT = "invalid_argument"
    INVALID_CHORD = "invalid_chord"
    UPSTREAM_FAILURE = "upstream_failure"
    EMPTY_RESULT = "empty_result"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    message: str

    @property
    def ok(self) -> bool:
        return False

    def to_payload(self) -> dict[str, str]:
        """Wire form: a single ``error`` field carrying the message."""
        return {"error": self.message}


Result = Union[Ok[T], Err]


def not_found(message: str) -> Err:
    return Err(ErrorKind.NOT_FOUND, message)


def out_of_range(message: str) -> Err:
    return Err(ErrorKind.OUT_OF_RANGE, message)


def invalid_argument(message: str) -> Err:
    return Err(ErrorKind.INVALID_ARGUMENT, message)
