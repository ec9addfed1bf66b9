"""
fieldcheck - Declarative Field Validation

This package lets callers describe per-field rules with a builder API and run
them against data objects, collecting human-readable error messages. It
includes:

- A field builder with string, array, file and date kinds
- Required and custom criteria, plus past-date rejection for dates
- Recursive validation of nested objects into a sparse error tree
- Reporting helpers and schemas loaded from JSON definitions

Example:
    >>> from fieldcheck import field, validate
    >>> schema = {"name": field("name").string().required()}
    >>> validate(schema, {"name": ""})
    {'name': ['Name is required']}
"""

__version__ = "0.1.0"
__author__ = "fieldcheck contributors"

# Version compatibility check
import sys

if sys.version_info < (3, 9):
    raise RuntimeError("fieldcheck requires Python 3.9 or higher")

# Import commonly used components for easier access
from .core.enums import FieldType
from .core.exceptions import (
    FieldAssertionError,
    FieldcheckError,
    SchemaDefinitionError,
    SchemaError,
)
from .utils.assertions import assert_that
from .utils.formatting import field_readable
from .validation import (
    DateDescriptor,
    ErrorReporter,
    Schema,
    TypedDescriptor,
    field,
    load_schema,
    schema_from_definition,
    validate,
)

__all__ = [
    "field",
    "validate",
    "Schema",
    "TypedDescriptor",
    "DateDescriptor",
    "FieldType",
    "ErrorReporter",
    "schema_from_definition",
    "load_schema",
    "assert_that",
    "field_readable",
    "FieldcheckError",
    "FieldAssertionError",
    "SchemaError",
    "SchemaDefinitionError",
]
