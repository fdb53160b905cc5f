"""Expectation table exports."""

from .loader import ConfigurationError, load_expectation_table, parse_expectation_entry
from .table_models import ExpectationCase, ExpectationTable

__all__ = [
    "ExpectationCase",
    "ExpectationTable",
    "ConfigurationError",
    "load_expectation_table",
    "parse_expectation_entry",
]
