"""Violation payload and the exception hierarchy raised by the checks.

INVARIANT: every error subclasses ``ValueError`` so callers catching the
standard exception keep working.
"""

from __future__ import annotations

from typing import ClassVar, Literal

from pydantic import BaseModel

ViolationCode = Literal["missing_value", "invalid_argument"]


class Violation(BaseModel):
    """Structured description of a failed check."""

    model_config = {"frozen": True}

    code: ViolationCode
    parameter: str
    message: str


class InvariantError(ValueError):
    """Base class for all check failures.

    Attributes:
        parameter_name: Name of the offending parameter.
        message: Human-readable message, also used as ``str(exc)``.
    """

    code: ClassVar[ViolationCode]

    def __init__(self, parameter_name: str, message: str) -> None:
        super().__init__(message)
        self.parameter_name = parameter_name
        self.message = message

    @property
    def violation(self) -> Violation:
        return Violation(code=self.code, parameter=self.parameter_name, message=self.message)


class MissingValueError(InvariantError):
    """A required value was ``None``."""

    code = "missing_value"


class InvalidArgumentError(InvariantError):
    """A value was present but blank, out of bounds, or of the wrong kind."""

    code = "invalid_argument"
