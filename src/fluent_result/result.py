"""Result type for functional error handling.

This module implements a Result type that makes failure explicit in function
signatures without relying on exceptions for control flow. A Result is either
an Ok holding a value or an Err holding an exception, and is never both.

Neither variant accepts None: an operation that succeeds without producing
anything returns Ok(), which holds the UNIT marker.

Example:
    >>> def divide(a: float, b: float) -> Result[float]:
    ...     if b == 0:
    ...         return Err(ValueError("Cannot divide by zero"))
    ...     return Ok(a / b)
    >>> divide(10, 2).get_or(0.0)
    5.0
    >>> divide(10, 0).map_or(lambda v: v, lambda e: -1.0)
    -1.0
"""

from __future__ import annotations

import logging
import sys
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TextIO, TypeVar

from fluent_result.exceptions import InvalidArgumentError, NoValuePresentError
from fluent_result.shared.config import get_settings
from fluent_result.shared.validation import require_callable, require_present

logger = logging.getLogger(__name__)

T = TypeVar("T")  # Success type
R = TypeVar("R")  # Map target type


class Unit:
    """Marker type with exactly one instance, UNIT.

    Used as the payload of Ok() for operations that succeed without a
    meaningful value.
    """

    __slots__ = ()
    _instance: Unit | None = None

    def __new__(cls) -> Unit:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Unit"


UNIT = Unit()


class Result(ABC, Generic[T]):
    """Either an Ok holding a value of type T or an Err holding an exception.

    Ok and Err are the only subclasses. Every operation is implemented once
    per variant, and every function argument is validated before the
    operation dispatches, whichever variant the receiver is.
    """

    @abstractmethod
    def is_ok(self) -> bool:
        """Check if this is a success result."""

    @abstractmethod
    def is_err(self) -> bool:
        """Check if this is an error result."""

    @abstractmethod
    def get(self) -> T:
        """Get the Ok value.

        Only call this after is_ok() returned True.

        Raises:
            NoValuePresentError: If this is an Err. The message includes the
                wrapped error's message.
        """

    @abstractmethod
    def get_or(self, fallback: T) -> T:
        """Get the Ok value, or fallback if this is an Err.

        Raises:
            InvalidArgumentError: If fallback is None, even on an Ok
        """

    @abstractmethod
    def get_or_else(self, fallback_from_error: Callable[[BaseException], T]) -> T:
        """Get the Ok value, or the value computed from the error if this is an Err.

        Args:
            fallback_from_error: Called with the wrapped error on an Err

        Raises:
            NullFunctionError: If fallback_from_error is missing or not callable
            InvalidArgumentError: If fallback_from_error returns None
        """

    @abstractmethod
    def get_error(self) -> BaseException:
        """Get the wrapped error.

        Raises:
            NoValuePresentError: If this is an Ok
        """

    @abstractmethod
    def get_error_message(self) -> str:
        """Get the human-readable message of the wrapped error.

        Raises:
            NoValuePresentError: If this is an Ok
        """

    @abstractmethod
    def print_error_message(self, file: TextIO | None = None) -> None:
        """Write the error message as one line to file.

        Args:
            file: Any object with a write(str) method. Defaults to the stream
                named by the error_message_sink setting (stdout).

        Raises:
            NoValuePresentError: If this is an Ok
        """

    @abstractmethod
    def on_ok(self, action: Callable[[T], Any]) -> Result[T]:
        """Call action with the value if this is an Ok.

        Returns:
            This result, unchanged
        """

    @abstractmethod
    def on_err(self, action: Callable[[BaseException], Any]) -> Result[T]:
        """Call action with the error if this is an Err.

        Returns:
            This result, unchanged
        """

    @abstractmethod
    def on(
        self,
        ok_action: Callable[[T], Any],
        err_action: Callable[[BaseException], Any],
    ) -> Result[T]:
        """Call ok_action with the value or err_action with the error.

        Both actions are validated before either is called.

        Returns:
            This result, unchanged
        """

    @abstractmethod
    def map(self, ok_transform: Callable[[T], Result[R]]) -> Result[R]:
        """Chain a Result-returning transform onto the value.

        On an Ok, returns ok_transform(value). On an Err, returns a new Err
        with the same error; ok_transform is not called.

        Raises:
            NullFunctionError: If ok_transform is missing or not callable
            InvalidArgumentError: If ok_transform does not return a Result
        """

    @abstractmethod
    def map_or(
        self,
        ok_transform: Callable[[T], R],
        err_transform: Callable[[BaseException], R],
    ) -> R:
        """Collapse the result into a plain value.

        Applies ok_transform to the value or err_transform to the error.
        Only the transform matching the variant is called.

        Raises:
            NullFunctionError: If either transform is missing or not callable
            InvalidArgumentError: If the selected transform returns None
        """


def _error_sink() -> TextIO:
    return getattr(sys, get_settings().error_message_sink)


def _no_error_present(operation: str) -> NoValuePresentError:
    logger.debug(f"{operation}() called on Ok")
    return NoValuePresentError("No error present", operation=operation)


@dataclass(frozen=True)
class Ok(Result[T]):
    """Successful result containing a value."""

    value: T = UNIT  # type: ignore[assignment]

    def __post_init__(self) -> None:
        require_present(self.value, "value")

    def is_ok(self) -> bool:
        """Check if this is a success result."""
        return True

    def is_err(self) -> bool:
        """Check if this is an error result."""
        return False

    def get(self) -> T:
        """Get the value (safe because this is Ok)."""
        return self.value

    def get_or(self, fallback: T) -> T:
        """Get the value (the fallback is still validated)."""
        require_present(fallback, "fallback")
        return self.value

    def get_or_else(self, fallback_from_error: Callable[[BaseException], T]) -> T:
        """Get the value (the function is validated but not called)."""
        require_callable(fallback_from_error, "fallback_from_error")
        return self.value

    def get_error(self) -> BaseException:
        raise _no_error_present("get_error")

    def get_error_message(self) -> str:
        raise _no_error_present("get_error_message")

    def print_error_message(self, file: TextIO | None = None) -> None:
        raise _no_error_present("print_error_message")

    def on_ok(self, action: Callable[[T], Any]) -> Result[T]:
        """Call action with the value."""
        require_callable(action, "action")
        action(self.value)
        return self

    def on_err(self, action: Callable[[BaseException], Any]) -> Result[T]:
        """Do nothing (this is Ok)."""
        require_callable(action, "action")
        return self

    def on(
        self,
        ok_action: Callable[[T], Any],
        err_action: Callable[[BaseException], Any],
    ) -> Result[T]:
        """Call ok_action with the value."""
        require_callable(ok_action, "ok_action")
        require_callable(err_action, "err_action")
        ok_action(self.value)
        return self

    def map(self, ok_transform: Callable[[T], Result[R]]) -> Result[R]:
        """Return the Result produced from the value."""
        require_callable(ok_transform, "ok_transform")
        mapped = require_present(ok_transform(self.value), "ok_transform result")
        if not isinstance(mapped, Result):
            logger.debug(f"ok_transform returned {type(mapped).__name__}, not a Result")
            raise InvalidArgumentError(
                f"ok_transform must return a Result, got {type(mapped).__name__}",
                argument="ok_transform result",
            )
        return mapped

    def map_or(
        self,
        ok_transform: Callable[[T], R],
        err_transform: Callable[[BaseException], R],
    ) -> R:
        """Transform the value with ok_transform."""
        require_callable(ok_transform, "ok_transform")
        require_callable(err_transform, "err_transform")
        return require_present(ok_transform(self.value), "ok_transform result")

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True)
class Err(Result[T]):
    """Error result containing an exception."""

    error: BaseException

    def __post_init__(self) -> None:
        require_present(self.error, "error")

    def is_ok(self) -> bool:
        """Check if this is a success result."""
        return False

    def is_err(self) -> bool:
        """Check if this is an error result."""
        return True

    def get(self) -> T:
        """Get the value (raises because this is Err)."""
        logger.debug("get() called on Err")
        raise NoValuePresentError(
            f"No value present: {self.get_error_message()}", operation="get"
        )

    def get_or(self, fallback: T) -> T:
        """Get the fallback (this is Err)."""
        return require_present(fallback, "fallback")

    def get_or_else(self, fallback_from_error: Callable[[BaseException], T]) -> T:
        """Compute the fallback from the error."""
        require_callable(fallback_from_error, "fallback_from_error")
        return require_present(fallback_from_error(self.error), "fallback_from_error result")

    def get_error(self) -> BaseException:
        """Get the wrapped error."""
        return self.error

    def get_error_message(self) -> str:
        """Get the message of the wrapped error."""
        return str(self.error)

    def print_error_message(self, file: TextIO | None = None) -> None:
        """Write the error message as one line to file, or the configured stream."""
        sink = file if file is not None else _error_sink()
        sink.write(f"{self.get_error_message()}\n")

    def on_ok(self, action: Callable[[T], Any]) -> Result[T]:
        """Do nothing (this is Err)."""
        require_callable(action, "action")
        return self

    def on_err(self, action: Callable[[BaseException], Any]) -> Result[T]:
        """Call action with the error."""
        require_callable(action, "action")
        action(self.error)
        return self

    def on(
        self,
        ok_action: Callable[[T], Any],
        err_action: Callable[[BaseException], Any],
    ) -> Result[T]:
        """Call err_action with the error."""
        require_callable(ok_action, "ok_action")
        require_callable(err_action, "err_action")
        err_action(self.error)
        return self

    def map(self, ok_transform: Callable[[T], Result[R]]) -> Result[R]:
        """Carry the error over to a new Err (the transform is not called)."""
        require_callable(ok_transform, "ok_transform")
        return Err(self.error)

    def map_or(
        self,
        ok_transform: Callable[[T], R],
        err_transform: Callable[[BaseException], R],
    ) -> R:
        """Transform the error with err_transform."""
        require_callable(ok_transform, "ok_transform")
        require_callable(err_transform, "err_transform")
        return require_present(err_transform(self.error), "err_transform result")

    def __hash__(self) -> int:
        return hash(self.error)

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


# Aliases for the two construction entry points
Success = Ok
Failure = Err
