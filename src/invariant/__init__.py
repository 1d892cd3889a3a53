"""Guard clauses for enforcing parameter invariants.

Each check returns its input unchanged on success and raises an
:class:`~invariant.errors.InvariantError` subclass on failure.
"""

from __future__ import annotations

from invariant.checks import (
    check_int_lower_bound_or_throw,
    check_lower_bound_or_throw,
    check_not_empty_or_throw,
    check_not_null_not_empty_or_throw,
    check_not_null_or_throw,
)
from invariant.errors import (
    InvalidArgumentError,
    InvariantError,
    MissingValueError,
    Violation,
)

__version__ = "1.0.0"

__all__ = [
    "InvalidArgumentError",
    "InvariantError",
    "MissingValueError",
    "Violation",
    "__version__",
    "check_int_lower_bound_or_throw",
    "check_lower_bound_or_throw",
    "check_not_empty_or_throw",
    "check_not_null_not_empty_or_throw",
    "check_not_null_or_throw",
]
