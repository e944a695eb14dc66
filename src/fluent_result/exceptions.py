"""
Contract-violation exception hierarchy.

This module defines the exceptions raised when a Result is used incorrectly.
They are programmer errors, reported at the call site, and are distinct from
the failures carried inside an Err value. The library never converts one of
these into an Err.

Exceptions are organized hierarchically with a base ResultError class so
callers can catch every misuse of the API in one place.
"""


class ResultError(Exception):
    """
    Base exception for all Result contract violations.

    All exceptions raised by the library itself inherit from this base class,
    making it easy to tell them apart from exceptions raised by user-supplied
    actions and transforms.
    """

    pass


class InvalidArgumentError(ResultError, ValueError):
    """
    Exception raised when an argument or produced value is absent.

    Raised when None is passed where a value is required: constructing an
    Ok or Err, a get_or fallback, or the value returned by a transform.

    Attributes:
        message: Human-readable error message
        argument: Name of the offending parameter
    """

    def __init__(self, message: str, argument: str = "") -> None:
        """
        Initialize InvalidArgumentError.

        Args:
            message: Human-readable error message
            argument: Name of the offending parameter
        """
        super().__init__(message)
        self.argument = argument


class NullFunctionError(InvalidArgumentError, TypeError):
    """
    Exception raised when a function argument is missing or not callable.

    Subclasses both InvalidArgumentError and TypeError, so it is caught by
    handlers for either.
    """

    def __init__(self, argument: str) -> None:
        """
        Initialize NullFunctionError.

        Args:
            argument: Name of the function parameter that was rejected
        """
        super().__init__(f"{argument} must be a callable, not None", argument=argument)


class NoValuePresentError(ResultError, LookupError):
    """
    Exception raised when an Ok-only or Err-only operation hits the wrong variant.

    Raised by get() on an Err, and by get_error(), get_error_message() and
    print_error_message() on an Ok.

    Attributes:
        message: Human-readable error message
        operation: Name of the rejected operation
    """

    def __init__(self, message: str, operation: str = "") -> None:
        """
        Initialize NoValuePresentError.

        Args:
            message: Human-readable error message
            operation: Name of the rejected operation (e.g. "get")
        """
        super().__init__(message)
        self.operation = operation

    def __str__(self) -> str:
        """Return the message, prefixed with the operation when known."""
        if self.operation:
            return f"{self.operation}(): {super().__str__()}"
        return super().__str__()
