"""Core types, enumerations and exceptions for fieldcheck."""

from .enums import FieldType
from .exceptions import (
    FieldAssertionError,
    FieldcheckError,
    SchemaDefinitionError,
    SchemaError,
)
from .types import Criteria, CustomValidator, ValidationErrors

__all__ = [
    "FieldType",
    "Criteria",
    "CustomValidator",
    "ValidationErrors",
    "FieldcheckError",
    "FieldAssertionError",
    "SchemaError",
    "SchemaDefinitionError",
]
