"""Shared types used across the validation modules."""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Union

from .enums import FieldType

# A custom criterion receives the field value and returns an error message,
# or None when the value is acceptable.
CustomValidator = Callable[[Any], Optional[str]]

# Leaf fields map to their messages, nested objects to a nested error map.
ValidationErrors = Dict[str, Union[List[str], "ValidationErrors"]]


@dataclass(frozen=True)
class Criteria:
    """
    Built-in rules configured on a field.

    Attributes:
        required (bool): Whether an empty value is reported as an error
        type (FieldType): Kind of builder that produced the descriptor
    """

    required: bool = False
    type: FieldType = FieldType.STRING
