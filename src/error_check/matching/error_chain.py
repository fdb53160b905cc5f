"""Error wrapping relation used by wrapped-error checks.

Hooks defined on errors (``unwrap``, ``__eq__``, ``is_error``) run user code. A
hook that raises counts as wrapping nothing or matching nothing.
"""

from __future__ import annotations

from collections.abc import Iterable


def unwrap(error: object) -> tuple[BaseException, ...]:
    """Return the errors directly wrapped by error.

    A callable ``unwrap()`` on the error takes precedence and may return ``None``,
    a single error or an iterable of errors. Exception groups wrap their member
    exceptions, and ``raise ... from cause`` wraps ``cause``. The implicit
    ``__context__`` of an exception raised while handling another is not wrapping.
    """
    try:
        unwrap_method = getattr(error, "unwrap", None)
        if callable(unwrap_method):
            return _as_errors(unwrap_method())
    except Exception:  # pylint: disable=broad-exception-caught
        return ()
    if isinstance(error, BaseExceptionGroup):
        return tuple(error.exceptions)
    cause = getattr(error, "__cause__", None)
    if isinstance(cause, BaseException):
        return (cause,)
    return ()


def _as_errors(linked: object) -> tuple[BaseException, ...]:
    if linked is None:
        return ()
    if isinstance(linked, BaseException):
        return (linked,)
    if isinstance(linked, Iterable) and not isinstance(linked, str | bytes):
        return tuple(item for item in linked if isinstance(item, BaseException))
    return ()


def is_error(error: object, target: object) -> bool:
    """Return True when error is target or wraps target anywhere in its chain."""
    if target is None or error is None:
        return error is target
    pending: list[object] = [error]
    seen: set[int] = set()
    while pending:
        link = pending.pop()
        if id(link) in seen:
            continue
        seen.add(id(link))
        if _link_matches(link, target):
            return True
        # Reversed so the first wrapped error is walked first.
        pending.extend(reversed(unwrap(link)))
    return False


def _link_matches(link: object, target: object) -> bool:
    if link is target:
        return True
    try:
        if link == target:
            return True
        is_error_method = getattr(link, "is_error", None)
        return callable(is_error_method) and bool(is_error_method(target))
    except Exception:  # pylint: disable=broad-exception-caught
        return False
