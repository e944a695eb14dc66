"""Argument validation helpers shared by every public Result entry point.

Both helpers log the violation at DEBUG and raise immediately, before any
side effect or transformation has run.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, TypeVar

from fluent_result.exceptions import InvalidArgumentError, NullFunctionError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def require_present(value: T | None, argument: str) -> T:
    """Return value unchanged, or raise InvalidArgumentError if it is None.

    Args:
        value: Value to check
        argument: Parameter name used in the error message

    Returns:
        The same value, narrowed to non-None

    Raises:
        InvalidArgumentError: If value is None
    """
    if value is None:
        logger.debug(f"Rejected None for {argument}")
        raise InvalidArgumentError(f"{argument} must not be None", argument=argument)
    return value


def require_callable(func: Any, argument: str) -> Callable[..., Any]:
    """Return func unchanged, or raise NullFunctionError if it is not callable.

    Raises:
        NullFunctionError: If func is None or not callable
    """
    if func is None or not callable(func):
        logger.debug(f"Rejected non-callable {type(func).__name__} for {argument}")
        raise NullFunctionError(argument)
    return func
