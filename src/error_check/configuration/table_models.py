"""Expectation table entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from error_check.matching.expectation_rules import Expectation


@dataclass(frozen=True)
class ExpectationCase:
    """One named row of a data-driven error table."""

    name: str
    expectation: Expectation
    notes: str = ""


@dataclass(frozen=True)
class ExpectationTable:
    """Expectation cases loaded from one table file."""

    source_path: Path
    cases: tuple[ExpectationCase, ...]

    def by_name(self, name: str) -> ExpectationCase:
        """Return the case called name."""
        for case in self.cases:
            if case.name == name:
                return case
        raise KeyError(name)

    def names(self) -> tuple[str, ...]:
        return tuple(case.name for case in self.cases)
