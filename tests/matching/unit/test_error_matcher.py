"""Error check service tests."""

from __future__ import annotations

import logging
from fractions import Fraction

import pytest
from error_check.matching.error_matcher import (
    evaluate_expectation,
    match_contains,
    match_contains_fold,
    match_error,
    match_exact_text,
    match_exact_text_fold,
)
from error_check.matching.expectation_rules import (
    Case,
    CaseEqual,
    Equal,
    Expectation,
    ExpectationKind,
)

ERR_ONE = Exception("Err one")
ERR_TWO = Exception("Err two")

UNEXPECTED_ONE = 'got unexpected error "Err one"'
EXPECTED_ONE = 'did not get expected error "Err one"'


class Marker:
    pass


class FalsyError(Exception):
    def __bool__(self) -> bool:
        return False


class BrokenError(Exception):
    def __str__(self) -> str:
        raise RuntimeError("cannot render")


CASES = [
    # got no error and expected none
    pytest.param(None, None, "", id="nil no-error"),
    pytest.param(None, False, "", id="bool no-error"),
    pytest.param(None, Expectation.exact_value(None), "", id="error no-error"),
    pytest.param(None, "", "", id="string no-error"),
    pytest.param(None, Equal(""), "", id="equal no-error"),
    pytest.param(None, Case(""), "", id="case no-error"),
    pytest.param(None, CaseEqual(""), "", id="caseequal no-error"),
    # got the error we expected
    pytest.param(ERR_ONE, True, "", id="bool expected"),
    pytest.param(ERR_ONE, ERR_ONE, "", id="error expected"),
    pytest.param(ERR_ONE, "one", "", id="string expected"),
    pytest.param(ERR_ONE, Equal("Err one"), "", id="equal expected"),
    pytest.param(ERR_ONE, Case("ONE"), "", id="case expected"),
    pytest.param(ERR_ONE, CaseEqual("ERR ONE"), "", id="caseequal expected"),
    # got an unexpected error
    pytest.param(ERR_ONE, None, UNEXPECTED_ONE, id="nil unexpected"),
    pytest.param(ERR_ONE, False, UNEXPECTED_ONE, id="bool unexpected"),
    pytest.param(ERR_ONE, Expectation.exact_value(None), UNEXPECTED_ONE, id="error unexpected"),
    pytest.param(ERR_ONE, "", UNEXPECTED_ONE, id="string unexpected"),
    pytest.param(ERR_ONE, Equal(""), UNEXPECTED_ONE, id="equal unexpected"),
    pytest.param(ERR_ONE, Case(""), UNEXPECTED_ONE, id="case unexpected"),
    pytest.param(ERR_ONE, CaseEqual(""), UNEXPECTED_ONE, id="caseequal unexpected"),
    # did not get the expected error
    pytest.param(None, True, "did not get expected error", id="bool missing"),
    pytest.param(None, ERR_ONE, EXPECTED_ONE, id="error missing"),
    pytest.param(None, "Err one", EXPECTED_ONE, id="string missing"),
    pytest.param(None, Case("Err one"), EXPECTED_ONE, id="case missing"),
    pytest.param(None, Equal("Err one"), EXPECTED_ONE, id="equal missing"),
    pytest.param(None, CaseEqual("Err one"), EXPECTED_ONE, id="caseequal missing"),
    # got the wrong error
    pytest.param(ERR_ONE, ERR_TWO, 'got error "Err one", want "Err two"', id="error wrong"),
    pytest.param(ERR_ONE, "Err two", 'got error "Err one", want "Err two"', id="string wrong"),
    pytest.param(ERR_ONE, Case("ERR TWO"), 'got error "Err one", want "ERR TWO"', id="case wrong"),
    pytest.param(ERR_ONE, Equal("Err two"), 'got error "Err one", want "Err two"', id="equal wrong"),
    pytest.param(
        ERR_ONE, CaseEqual("ERR TWO"), 'got error "Err one", want "ERR TWO"', id="caseequal wrong"
    ),
    # unsupported expectations
    pytest.param(None, 1, "Check does not support type int", id="bad type"),
    pytest.param(ERR_ONE, {}, "Check does not support type dict", id="bad mapping"),
    pytest.param(None, ValueError, "Check does not support type type", id="bad class"),
]


@pytest.mark.parametrize(("got", "want", "out"), CASES)
def test_match_error(got: object, want: object, out: str) -> None:
    assert match_error(got, want) == out


@pytest.mark.parametrize(("got", "want", "out"), CASES)
def test_text_wrappers_agree_with_match_error(got: object, want: object, out: str) -> None:
    if isinstance(want, Case):
        assert match_contains_fold(got, str(want)) == out
    elif isinstance(want, Equal):
        assert match_exact_text(got, str(want)) == out
    elif isinstance(want, CaseEqual):
        assert match_exact_text_fold(got, str(want)) == out
    elif isinstance(want, str):
        assert match_contains(got, want) == out


def test_exact_value_requires_the_same_instance() -> None:
    twin = Exception("Err one")

    assert match_error(ERR_ONE, twin) == 'got error "Err one", want "Err one"'


def test_contains_is_case_sensitive() -> None:
    assert match_contains(Exception("BOOM"), "boom") == 'got error "BOOM", want "boom"'
    assert match_contains_fold(Exception("BOOM"), "boom") == ""


def test_fold_uses_full_case_folding() -> None:
    assert match_exact_text_fold(Exception("Straße"), "STRASSE") == ""


def test_unsupported_reports_qualified_type_name() -> None:
    assert match_error(None, Marker()) == (
        f"Check does not support type {Marker.__module__}.Marker"
    )
    assert match_error(None, Fraction(1, 2)) == "Check does not support type fractions.Fraction"


def test_explicit_unsupported_expectation() -> None:
    assert match_error(ERR_ONE, Expectation.unsupported(2.5)) == (
        "Check does not support type float"
    )


def test_mistyped_payloads_are_reported_as_unsupported() -> None:
    assert evaluate_expectation(ERR_ONE, Expectation(ExpectationKind.PRESENT, "yes")) == (
        "Check does not support type str"
    )
    assert evaluate_expectation(ERR_ONE, Expectation(ExpectationKind.CONTAINS, 7)) == (
        "Check does not support type int"
    )
    assert evaluate_expectation(None, Expectation(ExpectationKind.EXACT_VALUE, "Err one")) == (
        "Check does not support type str"
    )


def test_empty_message_error_is_not_absent() -> None:
    silent = ValueError()

    assert match_error(None, Expectation.exact_value(silent)) == 'did not get expected error ""'
    assert match_error(silent, None) == 'got unexpected error ""'
    assert match_error(silent, Expectation.absent()) == 'got unexpected error ""'


def test_falsy_error_is_still_present() -> None:
    falsy = FalsyError("quiet")

    assert match_error(falsy, True) == ""
    assert match_error(falsy, False) == 'got unexpected error "quiet"'
    assert match_error(None, falsy) == 'did not get expected error "quiet"'


def test_messages_are_quoted_with_escapes() -> None:
    error = Exception('bad "input"\n\tat line 2')

    assert match_error(error, None) == r'got unexpected error "bad \"input\"\n\tat line 2"'


def test_unprintable_error_does_not_raise() -> None:
    assert match_error(BrokenError(), None) == (
        'got unexpected error "<unprintable BrokenError object>"'
    )


def test_unsupported_expectation_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="error_check")

    match_error(ERR_ONE, 42)

    assert "Check does not support type int" in caplog.text


@pytest.mark.parametrize("error", [ERR_ONE, KeyError("k"), FalsyError(), ValueError()])
def test_bool_expectation_tracks_presence(error: Exception) -> None:
    assert match_error(error, True) == ""
    assert match_error(error, False) != ""
    assert match_error(None, True) != ""
    assert match_error(None, False) == ""
