"""Expectation table loader service."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from error_check.matching.expectation_rules import Expectation, parse_expectation

from .table_models import ExpectationCase, ExpectationTable

_LOGGER = logging.getLogger(__name__)

_TEXT_KEYS = {
    "contains": Expectation.contains,
    "contains_fold": Expectation.contains_fold,
    "exact_text": Expectation.exact_text,
    "exact_text_fold": Expectation.exact_text_fold,
}
_SUPPORTED_KEYS = ("absent", "present", *_TEXT_KEYS)


class ConfigurationError(Exception):
    """Raised when an expectation table file is invalid."""


def load_expectation_table(table_path: Path | str) -> ExpectationTable:
    """Load and validate an expectation table file."""
    path = Path(table_path)
    if not path.exists():
        raise ConfigurationError(f"Expectation table not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse expectation table: {exc}") from exc

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Expectation table root must be a mapping.")

    cases = _parse_cases(parsed.get("cases"))
    _LOGGER.debug("Loaded %d expectation cases from %s", len(cases), path)
    return ExpectationTable(source_path=path, cases=cases)


def _parse_cases(value: Any) -> tuple[ExpectationCase, ...]:
    if not isinstance(value, Sequence) or isinstance(value, str | bytes):
        raise ConfigurationError("Expectation table requires a 'cases' list.")
    cases: list[ExpectationCase] = []
    seen_names: set[str] = set()
    for index, entry in enumerate(value, start=1):
        label = f"cases[{index}]"
        section = _require_mapping(entry, label)
        name = _require_non_empty_string(section.get("name"), f"{label}.name")
        if name in seen_names:
            raise ConfigurationError(f"Duplicate case name '{name}'.")
        seen_names.add(name)
        cases.append(
            ExpectationCase(
                name=name,
                expectation=parse_expectation_entry(section.get("expect"), f"{label}.expect"),
                notes=_optional_string(section.get("notes"), f"{label}.notes"),
            )
        )
    return tuple(cases)


def parse_expectation_entry(value: Any, label: str = "expect") -> Expectation:
    """Convert one table cell into an expectation.

    Scalars are mapped the same way inline table values are. A mapping selects
    the expectation kind explicitly with exactly one key.
    """
    if not isinstance(value, Mapping):
        return parse_expectation(value)
    if len(value) != 1:
        raise ConfigurationError(f"{label} must contain exactly one expectation key.")
    key, payload = next(iter(value.items()))
    if key == "absent":
        if payload is not None and payload is not True:
            raise ConfigurationError(f"{label}.absent takes no value.")
        return Expectation.absent()
    if key == "present":
        if not isinstance(payload, bool):
            raise ConfigurationError(f"{label}.present must be a boolean.")
        return Expectation.present(payload)
    constructor = _TEXT_KEYS.get(key)
    if constructor is None:
        supported = ", ".join(_SUPPORTED_KEYS)
        raise ConfigurationError(f"{label} key '{key}' is not supported (use one of {supported}).")
    if payload is None:
        payload = ""
    if not isinstance(payload, str):
        raise ConfigurationError(f"{label}.{key} must be a string.")
    return constructor(payload)


def _require_mapping(value: Any, label: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"{label} must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    return value.strip()
