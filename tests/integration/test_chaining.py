"""Integration tests for fluent chains across combinators."""

import io

import pytest

from fluent_result import Err, NoValuePresentError, Ok, Result


def divide(a: float, b: float) -> Result[float]:
    if b == 0:
        return Err(ValueError("Cannot divide by zero"))
    return Ok(a / b)


class TestDivideScenario:
    """End-to-end chains built on divide()."""

    def test_recovering_chain(self) -> None:
        """Test an Err is recovered by map_or and carried through to a string."""
        first_errors: list[BaseException] = []
        later_errors: list[BaseException] = []

        result = (
            divide(10, 0)
            .on_err(first_errors.append)
            .map_or(
                lambda v: Err(RuntimeError("unreachable")),
                lambda e: Ok(4),
            )
            .on_err(later_errors.append)
            .map(lambda v: Ok(str(v)))
            .get()
        )

        assert result == "4"
        assert len(first_errors) == 1
        assert str(first_errors[0]) == "Cannot divide by zero"
        assert later_errors == []

    def test_successful_division(self) -> None:
        """Test divide(10, 2) yields 5.0 through every extraction path."""
        result = divide(10, 2)
        assert result == Ok(5.0)
        assert result.get() == 5.0
        assert result.get_or(0.0) == 5.0
        with pytest.raises(NoValuePresentError):
            result.get_error()

    def test_failed_division(self) -> None:
        """Test divide(10, 0) falls back and reports its message."""
        result = divide(10, 0)
        assert result.get_or(0.0) == 0.0
        assert result.get_or_else(lambda e: 1.0) == 1.0
        with pytest.raises(NoValuePresentError, match="Cannot divide by zero"):
            result.get()

        sink = io.StringIO()
        result.print_error_message(file=sink)
        assert sink.getvalue() == "Cannot divide by zero\n"

    def test_error_survives_map_chain(self) -> None:
        """Test an Err passes through several maps untouched."""
        result = divide(1, 0)
        mapped = result.map(lambda v: Ok(v * 2)).map(lambda v: Ok(v + 1))
        assert mapped == result
        assert mapped.get_error() is result.get_error()

    def test_nested_divisions(self) -> None:
        """Test map composes Result-returning steps."""
        assert divide(100, 5).map(lambda v: divide(v, 2)) == Ok(10.0)
        assert divide(100, 5).map(lambda v: divide(v, 0)).is_err()
