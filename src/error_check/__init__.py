"""Error checks for tests, including table-driven tests.

Each check returns an empty string when the error matched and a string
describing the difference when it did not.
"""

import logging

from .matching import (
    Case,
    CaseEqual,
    Equal,
    Expectation,
    ExpectationKind,
    evaluate_expectation,
    is_error,
    match_contains,
    match_contains_fold,
    match_error,
    match_exact_text,
    match_exact_text_fold,
    match_wrapped,
    parse_expectation,
    unwrap,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Case",
    "CaseEqual",
    "Equal",
    "Expectation",
    "ExpectationKind",
    "parse_expectation",
    "evaluate_expectation",
    "match_error",
    "match_contains",
    "match_contains_fold",
    "match_exact_text",
    "match_exact_text_fold",
    "match_wrapped",
    "is_error",
    "unwrap",
]
