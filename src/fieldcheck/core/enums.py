"""
Enumerations for field kinds in validation schemas.

This module defines the kind tag carried by every built field descriptor. The
tag records which builder entry point produced the descriptor; validation does
not enforce it against the runtime type of the value.
"""

from enum import Enum


class FieldType(Enum):
    """
    Enumeration of the field kinds a schema author can select.

    Each member corresponds to one builder entry point on an untyped field:
    ``string()``, ``array()``, ``file()`` and ``date()``.
    """

    STRING = "string"  # Free text input
    ARRAY = "array"  # List, tuple or set of values
    FILE = "file"  # Uploaded file handle or reference
    DATE = "date"  # Calendar date or timestamp
