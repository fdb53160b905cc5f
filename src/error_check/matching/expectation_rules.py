"""Expectation modeling for error checks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Equal(str):
    """Text the error message must match exactly."""


class Case(str):
    """Text the error message must contain, case-insensitive."""


class CaseEqual(str):
    """Text the error message must match exactly, case-insensitive."""


class ExpectationKind(str, Enum):
    """Supported expectation kinds."""

    ABSENT = "absent"
    PRESENT = "present"
    EXACT_VALUE = "exact_value"
    WRAPPED_VALUE = "wrapped_value"
    CONTAINS = "contains"
    CONTAINS_FOLD = "contains_fold"
    EXACT_TEXT = "exact_text"
    EXACT_TEXT_FOLD = "exact_text_fold"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class Expectation:
    """What a check expects of an error: one kind plus its payload."""

    kind: ExpectationKind
    expected: object | None = None

    @classmethod
    def absent(cls) -> Expectation:
        return cls(kind=ExpectationKind.ABSENT)

    @classmethod
    def present(cls, flag: bool = True) -> Expectation:
        return cls(kind=ExpectationKind.PRESENT, expected=flag)

    @classmethod
    def exact_value(cls, error: BaseException | None) -> Expectation:
        return cls(kind=ExpectationKind.EXACT_VALUE, expected=error)

    @classmethod
    def wrapped_value(cls, error: BaseException | None) -> Expectation:
        return cls(kind=ExpectationKind.WRAPPED_VALUE, expected=error)

    @classmethod
    def contains(cls, text: str) -> Expectation:
        return cls(kind=ExpectationKind.CONTAINS, expected=text)

    @classmethod
    def contains_fold(cls, text: str) -> Expectation:
        return cls(kind=ExpectationKind.CONTAINS_FOLD, expected=text)

    @classmethod
    def exact_text(cls, text: str) -> Expectation:
        return cls(kind=ExpectationKind.EXACT_TEXT, expected=text)

    @classmethod
    def exact_text_fold(cls, text: str) -> Expectation:
        return cls(kind=ExpectationKind.EXACT_TEXT_FOLD, expected=text)

    @classmethod
    def unsupported(cls, payload: object) -> Expectation:
        return cls(kind=ExpectationKind.UNSUPPORTED, expected=payload)


def parse_expectation(raw: object) -> Expectation:
    """Map a raw table value onto an explicit expectation.

    ``None`` expects no error, a bool expects an error to be present (or not),
    a plain string must be contained in the message and the wrapper string kinds
    select the other text modes. An exception instance must be the very error
    returned. Anything else is kept as an unsupported expectation so the check
    reports it instead of failing.
    """
    if isinstance(raw, Expectation):
        return raw
    if raw is None:
        return Expectation.absent()
    if isinstance(raw, bool):
        return Expectation.present(raw)
    if isinstance(raw, Equal):
        return Expectation.exact_text(str(raw))
    if isinstance(raw, CaseEqual):
        return Expectation.exact_text_fold(str(raw))
    if isinstance(raw, Case):
        return Expectation.contains_fold(str(raw))
    if isinstance(raw, str):
        return Expectation.contains(raw)
    if isinstance(raw, BaseException):
        return Expectation.exact_value(raw)
    return Expectation.unsupported(raw)
