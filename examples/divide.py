"""Divide-by-zero walkthrough for fluent-result.

Run with:
    python examples/divide.py

Set FLUENT_RESULT_LOG_LEVEL=DEBUG to see contract violations logged.
"""

from fluent_result import Err, NoValuePresentError, Ok, Result
from fluent_result.shared import configure_logging, get_settings
from fluent_result.shared.logging import get_logger

logger = get_logger(__name__)


def divide(a: float, b: float) -> Result[float]:
    if b == 0:
        return Err(ValueError("Cannot divide by zero"))
    return Ok(a / b)


def halve_quotient(a: float, b: float) -> Result[float]:
    """Return early with the Err, the way a caller propagates failures."""
    match divide(a, b):
        case Ok(value):
            quotient = value
        case Err(error):
            return Err(error)
    return Ok(quotient / 2)


def main() -> None:
    configure_logging(get_settings().log_level)

    logger.info(f"divide(10, 2) -> {divide(10, 2)}")
    logger.info(f"divide(10, 0).get_or(0.0) -> {divide(10, 0).get_or(0.0)}")

    recovered = (
        divide(10, 0)
        .on_err(lambda e: logger.warning(f"division failed: {e}"))
        .map_or(lambda v: Err(RuntimeError("unreachable")), lambda e: Ok(4))
        .map(lambda v: Ok(str(v)))
        .get()
    )
    logger.info(f"recovered value: {recovered!r}")

    halve_quotient(1, 0).print_error_message()

    try:
        divide(1, 0).get()
    except NoValuePresentError as e:
        logger.error(f"unwrap failed: {e}")


if __name__ == "__main__":
    main()
