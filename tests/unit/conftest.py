"""Shared fixtures for unit tests.

Provides:
- A divide() function returning Result instead of raising
- A call recorder for observing side effects of actions and transforms
"""

from collections.abc import Callable, Iterator
from typing import Any

import pytest

from fluent_result import Err, Ok, Result
from fluent_result.shared.config import get_settings


def divide(a: float, b: float) -> Result[float]:
    """Divide a by b, returning Err instead of raising on a zero divisor."""
    if b == 0:
        return Err(ValueError("Cannot divide by zero"))
    return Ok(a / b)


class CallRecorder:
    """Records the arguments of every call made through it."""

    def __init__(self, returns: Any = None) -> None:
        self.calls: list[Any] = []
        self.returns = returns

    def __call__(self, arg: Any) -> Any:
        self.calls.append(arg)
        return self.returns

    @property
    def called(self) -> bool:
        return bool(self.calls)


@pytest.fixture
def divide_fn() -> Callable[[float, float], Result[float]]:
    """Provide the Result-returning divide function."""
    return divide


@pytest.fixture
def recorder() -> Callable[..., CallRecorder]:
    """Factory for call recorders with an optional return value."""
    return CallRecorder


@pytest.fixture
def fresh_settings() -> Iterator[None]:
    """Reload settings from the environment around a test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
