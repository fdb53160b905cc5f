"""Error check service comparing an actual error with an expectation.

Every check returns an empty string when the actual error satisfies the
expectation and a diagnostic describing the difference otherwise::

    # We just care that there was an error
    if message := match_error(err, True):
        pytest.fail(f"calling load: {message}")

    # str(err) must contain "unknown type"
    assert match_error(err, "unknown type") == ""

    # err must wrap the EOFError raised by the reader
    assert match_wrapped(err, eof) == ""

Checks never raise, whatever expectation they are given.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from .error_chain import is_error
from .expectation_rules import Expectation, ExpectationKind, parse_expectation
from .message_formatting import (
    MISSING_ERROR,
    expected_error,
    message_of,
    unexpected_error,
    unsupported_type,
    wrong_error,
)

_LOGGER = logging.getLogger(__name__)

_Evaluator = Callable[[object, object], str]
_TextPredicate = Callable[[str, str], bool]


def match_error(actual: object, want: object) -> str:
    """Compare actual with want, choosing the check from the kind of want.

    ``None``: actual must be absent
    ``bool``: actual must be present (True) or absent (False)
    exception: actual must be exactly want
    ``str``: ``str(actual)`` must contain want
    ``Case``: ``str(actual)`` must contain want, case-insensitive
    ``Equal``: ``str(actual)`` must be want
    ``CaseEqual``: ``str(actual)`` must be want, case-insensitive
    ``Expectation``: checked as built
    """
    return evaluate_expectation(actual, parse_expectation(want))


def evaluate_expectation(actual: object, expectation: Expectation) -> str:
    """Return an empty string if actual satisfies expectation, else a diagnostic."""
    evaluator = _EVALUATORS.get(expectation.kind, _evaluate_unsupported)
    return evaluator(actual, expectation.expected)


def match_contains(actual: object, text: str) -> str:
    """Return an empty string if ``str(actual)`` contains text."""
    return evaluate_expectation(actual, Expectation.contains(text))


def match_contains_fold(actual: object, text: str) -> str:
    """Return an empty string if ``str(actual)`` contains text, case-insensitive."""
    return evaluate_expectation(actual, Expectation.contains_fold(text))


def match_exact_text(actual: object, text: str) -> str:
    """Return an empty string if ``str(actual)`` is exactly text."""
    return evaluate_expectation(actual, Expectation.exact_text(text))


def match_exact_text_fold(actual: object, text: str) -> str:
    """Return an empty string if ``str(actual)`` is text, case-insensitive."""
    return evaluate_expectation(actual, Expectation.exact_text_fold(text))


def match_wrapped(actual: object, expected: BaseException | None) -> str:
    """Return an empty string if actual is expected or wraps it."""
    return evaluate_expectation(actual, Expectation.wrapped_value(expected))


def _evaluate_absent(actual: object, _expected: object) -> str:
    if actual is None:
        return ""
    return unexpected_error(actual)


def _evaluate_present(actual: object, flag: object) -> str:
    if not isinstance(flag, bool):
        return _evaluate_unsupported(actual, flag)
    if flag == (actual is not None):
        return ""
    if flag:
        return MISSING_ERROR
    return unexpected_error(actual)


def _evaluate_exact_value(actual: object, expected: object) -> str:
    if expected is None:
        return _evaluate_absent(actual, expected)
    if not isinstance(expected, BaseException):
        return _evaluate_unsupported(actual, expected)
    if actual is None:
        return expected_error(expected)
    if actual is not expected:
        return wrong_error(actual, expected)
    return ""


def _evaluate_wrapped_value(actual: object, expected: object) -> str:
    if expected is not None and not isinstance(expected, BaseException):
        return _evaluate_unsupported(actual, expected)
    if actual is None and expected is None:
        return ""
    if actual is None:
        return expected_error(expected)
    if expected is None:
        return unexpected_error(actual)
    if not is_error(actual, expected):
        return wrong_error(actual, expected)
    return ""


def _text_evaluator(predicate: _TextPredicate) -> _Evaluator:
    def evaluate(actual: object, text: object) -> str:
        if not isinstance(text, str):
            return _evaluate_unsupported(actual, text)
        if actual is None:
            return "" if text == "" else expected_error(text)
        if text == "":
            return unexpected_error(actual)
        if not predicate(message_of(actual), text):
            return wrong_error(actual, text)
        return ""

    return evaluate


def _contains(message: str, text: str) -> bool:
    return text in message


def _contains_fold(message: str, text: str) -> bool:
    return text.casefold() in message.casefold()


def _equals(message: str, text: str) -> bool:
    return message == text


def _equals_fold(message: str, text: str) -> bool:
    return message.casefold() == text.casefold()


def _evaluate_unsupported(_actual: object, payload: object) -> str:
    diagnostic = unsupported_type(payload)
    _LOGGER.debug("Unsupported error expectation: %s", diagnostic)
    return diagnostic


_EVALUATORS: dict[ExpectationKind, _Evaluator] = {
    ExpectationKind.ABSENT: _evaluate_absent,
    ExpectationKind.PRESENT: _evaluate_present,
    ExpectationKind.EXACT_VALUE: _evaluate_exact_value,
    ExpectationKind.WRAPPED_VALUE: _evaluate_wrapped_value,
    ExpectationKind.CONTAINS: _text_evaluator(_contains),
    ExpectationKind.CONTAINS_FOLD: _text_evaluator(_contains_fold),
    ExpectationKind.EXACT_TEXT: _text_evaluator(_equals),
    ExpectationKind.EXACT_TEXT_FOLD: _text_evaluator(_equals_fold),
    ExpectationKind.UNSUPPORTED: _evaluate_unsupported,
}
