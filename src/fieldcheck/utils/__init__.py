"""
Utility package for fieldcheck.

Small helpers shared by the validation modules and exposed to callers:
precondition assertions and field-name formatting.
"""

from .assertions import assert_that
from .formatting import field_readable

__all__ = ["assert_that", "field_readable"]
