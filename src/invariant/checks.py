"""Parameter guard clauses.

Every check returns the tested value unchanged when it passes, so calls
can be inlined into assignments::

    self.name = check_not_null_not_empty_or_throw(name, "name")

Failures raise immediately and are never recovered here.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar

from invariant.errors import InvalidArgumentError, InvariantError, MissingValueError

if TYPE_CHECKING:
    from _typeshed import SupportsRichComparison

T = TypeVar("T")
N = TypeVar("N", bound="SupportsRichComparison")

logger = logging.getLogger(__name__)

# Java trim() treats every code point up to U+0020 as strippable.
_TRIMMABLE = frozenset(map(chr, range(0x21)))


def _is_blank(text: str) -> bool:
    return all(ch in _TRIMMABLE or ch.isspace() for ch in text)


def _fail(exc: InvariantError, check: str) -> InvariantError:
    logger.debug(
        "invariant_violated",
        extra={"code": exc.code, "parameter": exc.parameter_name, "check": check},
    )
    return exc


def _missing(parameter_name: str, check: str) -> InvariantError:
    message = f"Value of parameter '{parameter_name}' cannot be null"
    return _fail(MissingValueError(parameter_name, message), check)


def _empty(parameter_name: str, check: str) -> InvariantError:
    message = f"Value of parameter '{parameter_name}' cannot be empty"
    return _fail(InvalidArgumentError(parameter_name, message), check)


def _below(parameter_name: str, bound: object, check: str) -> InvariantError:
    message = f"Value of parameter '{parameter_name}' must be larger than or equal to {bound}"
    return _fail(InvalidArgumentError(parameter_name, message), check)


def check_not_null_or_throw(value: T | None, parameter_name: str) -> T:
    """Return *value* unchanged, or raise :class:`MissingValueError` if it is None.

    Falsy values (``0``, ``""``, ``[]``) are present and pass.
    """
    if value is None:
        raise _missing(parameter_name, "not_null")
    return value


def check_not_empty_or_throw(text: str | None, parameter_name: str) -> str | None:
    """Reject strings made only of whitespace and control characters.

    None passes through; combine with :func:`check_not_null_or_throw`
    (or use :func:`check_not_null_not_empty_or_throw`) to reject it too.

    Raises:
        InvalidArgumentError: If *text* is blank.
    """
    if text is not None and _is_blank(text):
        raise _empty(parameter_name, "not_empty")
    return text


def check_not_null_not_empty_or_throw(text: str | None, parameter_name: str) -> str:
    """Require *text* to be present and non-blank.

    Raises:
        MissingValueError: If *text* is None.
        InvalidArgumentError: If *text* is blank.
    """
    present = check_not_null_or_throw(text, parameter_name)
    if _is_blank(present):
        raise _empty(parameter_name, "not_empty")
    return present


def check_lower_bound_or_throw(value: N, parameter_name: str, bound: N) -> N:
    """Return *value* unchanged if ``value >= bound``.

    Works for any mutually comparable numbers (int, float, Decimal, Fraction).

    Raises:
        InvalidArgumentError: If *value* is less than *bound*, or either is
            a float NaN.
    """
    if not value >= bound:
        raise _below(parameter_name, bound, "lower_bound")
    return value


def check_int_lower_bound_or_throw(value: int, parameter_name: str, bound: int) -> int:
    """Integer-only variant of :func:`check_lower_bound_or_throw`.

    Both *value* and *bound* must be ``int``; ``bool`` is rejected.
    """
    for name, candidate in ((parameter_name, value), ("bound", bound)):
        if not isinstance(candidate, int) or isinstance(candidate, bool):
            message = f"Value of parameter '{name}' must be an integer"
            raise _fail(InvalidArgumentError(name, message), "int_lower_bound")
    if value < bound:
        raise _below(parameter_name, bound, "int_lower_bound")
    return value
