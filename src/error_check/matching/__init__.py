"""Error matching domain exports."""

from .error_chain import is_error, unwrap
from .error_matcher import (
    evaluate_expectation,
    match_contains,
    match_contains_fold,
    match_error,
    match_exact_text,
    match_exact_text_fold,
    match_wrapped,
)
from .expectation_rules import (
    Case,
    CaseEqual,
    Equal,
    Expectation,
    ExpectationKind,
    parse_expectation,
)
from .message_formatting import quote

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
    "quote",
]
