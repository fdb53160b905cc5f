"""Diagnostic message rendering for error checks."""

from __future__ import annotations

MISSING_ERROR = "did not get expected error"
UNSUPPORTED_TYPE_PREFIX = "Check does not support type "

_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}


def quote(text: str) -> str:
    """Return text double-quoted, escaping quotes, backslashes and non-printable characters.

    The escaping matches Go's ``%q`` verb so that messages produced here compare equal
    to messages produced by tooling on the other side of a shared test table.
    """
    return '"' + "".join(_escape_character(character) for character in text) + '"'


def _escape_character(character: str) -> str:
    escaped = _ESCAPES.get(character)
    if escaped is not None:
        return escaped
    if character.isprintable():
        return character
    code_point = ord(character)
    if code_point < 0x20 or code_point == 0x7F:
        return f"\\x{code_point:02x}"
    if 0xD800 <= code_point <= 0xDFFF:
        # Lone surrogates are not valid code points.
        code_point = 0xFFFD
    if code_point < 0x10000:
        return f"\\u{code_point:04x}"
    return f"\\U{code_point:08x}"


def message_of(value: object) -> str:
    """Return the message text of an error or text payload."""
    try:
        return str(value)
    except Exception:  # pylint: disable=broad-exception-caught
        return f"<unprintable {type(value).__name__} object>"


def type_name(value: object) -> str:
    """Return the runtime type name of value, module-qualified outside builtins."""
    value_type = type(value)
    if value_type.__module__ == "builtins":
        return value_type.__qualname__
    return f"{value_type.__module__}.{value_type.__qualname__}"


def unexpected_error(actual: object) -> str:
    return f"got unexpected error {quote(message_of(actual))}"


def expected_error(expected: object) -> str:
    return f"did not get expected error {quote(message_of(expected))}"


def wrong_error(actual: object, expected: object) -> str:
    return f"got error {quote(message_of(actual))}, want {quote(message_of(expected))}"


def unsupported_type(payload: object) -> str:
    return UNSUPPORTED_TYPE_PREFIX + type_name(payload)
