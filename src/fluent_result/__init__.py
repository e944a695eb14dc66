"""
fluent-result: an Ok/Err result container with fluent combinators.

Functions that can fail return a Result instead of raising, and callers
inspect, extract, or transform it without try/except blocks.
"""

import logging

from fluent_result.exceptions import (
    InvalidArgumentError,
    NoValuePresentError,
    NullFunctionError,
    ResultError,
)
from fluent_result.result import UNIT, Err, Failure, Ok, Result, Success, Unit

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "Result",
    "Ok",
    "Err",
    "Success",
    "Failure",
    "Unit",
    "UNIT",
    "ResultError",
    "InvalidArgumentError",
    "NullFunctionError",
    "NoValuePresentError",
]
