"""Helpers for turning field names into text shown to end users."""

from typing import Any


def field_readable(field_name: Any) -> str:
    """
    Convert a snake_case field name into a capitalized label.

    Underscores become spaces, the first character is upper-cased and the
    rest lower-cased.

    Args:
        field_name: Field name, usually a string key of the validated object

    Returns:
        str: Readable label, e.g. "First name" for "first_name"
    """
    return str(field_name).replace("_", " ").capitalize()
