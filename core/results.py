# ABOUTME: Classified outcomes returned by validation helpers and repositories
# ABOUTME: A Result carries either a value or a Failure tagged with its ErrorKind

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ErrorKind(Enum):
    """Failure classes understood by the HTTP error mapper."""

    INVALID_ARGUMENT = "invalid_argument"
    NOT_FOUND = "not_found"
    UNCLASSIFIED = "unclassified"


@dataclass(frozen=True)
class Failure:
    kind: ErrorKind
    msg: str | None = None


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of a validation or repository call.

    Exactly one of ``value`` / ``failure`` is meaningful: ``failure`` is None on success.
    A successful Result may still hold ``value=None`` (e.g. a delete).
    """

    value: T | None = None
    failure: Failure | None = None

    @property
    def is_ok(self) -> bool:
        return self.failure is None

    @classmethod
    def ok(cls, value: Any = None) -> "Result":
        return cls(value=value)

    @classmethod
    def fail(cls, kind: ErrorKind, msg: str | None = None) -> "Result":
        return cls(failure=Failure(kind, msg))

    @classmethod
    def invalid(cls, msg: str | None = None) -> "Result":
        return cls.fail(ErrorKind.INVALID_ARGUMENT, msg)

    @classmethod
    def not_found(cls, msg: str | None = None) -> "Result":
        return cls.fail(ErrorKind.NOT_FOUND, msg)

    @classmethod
    def unclassified(cls, msg: str | None = None) -> "Result":
        return cls.fail(ErrorKind.UNCLASSIFIED, msg)
