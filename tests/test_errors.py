"""Tests for the error hierarchy and violation payloads."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from invariant import (
    InvalidArgumentError,
    InvariantError,
    MissingValueError,
    Violation,
    check_lower_bound_or_throw,
    check_not_null_or_throw,
)


class TestHierarchy:
    @pytest.mark.parametrize("cls", [MissingValueError, InvalidArgumentError])
    def test_subclasses_value_error(self, cls: type[InvariantError]) -> None:
        assert issubclass(cls, InvariantError)
        assert issubclass(cls, ValueError)

    def test_catchable_as_value_error(self) -> None:
        with pytest.raises(ValueError):
            check_not_null_or_throw(None, "x")

    def test_str_is_message(self) -> None:
        exc = InvalidArgumentError("limit", "boom")
        assert str(exc) == "boom"
        assert exc.parameter_name == "limit"


class TestViolation:
    def test_missing_value_payload(self) -> None:
        with pytest.raises(MissingValueError) as excinfo:
            check_not_null_or_throw(None, "userId")
        violation = excinfo.value.violation
        assert violation == Violation(
            code="missing_value",
            parameter="userId",
            message="Value of parameter 'userId' cannot be null",
        )

    def test_invalid_argument_payload(self) -> None:
        with pytest.raises(InvalidArgumentError) as excinfo:
            check_lower_bound_or_throw(1, "limit", 2)
        assert excinfo.value.violation.code == "invalid_argument"
        assert excinfo.value.violation.model_dump()["parameter"] == "limit"

    def test_frozen(self) -> None:
        violation = Violation(code="missing_value", parameter="x", message="m")
        with pytest.raises(ValidationError):
            violation.code = "invalid_argument"  # type: ignore[misc]

    def test_unknown_code_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Violation(code="other", parameter="x", message="m")  # type: ignore[arg-type]
