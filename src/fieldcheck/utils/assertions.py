"""Precondition checks that survive ``python -O``."""

from typing import Any, Optional

from ..core.exceptions import FieldAssertionError


def assert_that(condition: Any, message: Optional[str] = None) -> None:
    """
    Abort with a FieldAssertionError when a condition does not hold.

    Args:
        condition: Value tested for truthiness
        message: Error message, defaults to "Assertion failed"

    Raises:
        FieldAssertionError: If condition is falsy

    Example:
        >>> assert_that(len(items) > 0, "items must not be empty")
    """
    if not condition:
        raise FieldAssertionError(message or "Assertion failed")
