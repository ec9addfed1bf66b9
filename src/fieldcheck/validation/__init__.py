"""
Validation System for fieldcheck

This package provides the field builder, the schema validator and the helpers
around them.

Key Components:
- field: Entry point of the builder, narrowed with string(), array(), file()
  or date()
- TypedDescriptor: Built rules for one field, with required() and custom()
- DateDescriptor: Date rules, adding only_future()
- validate / Schema: Recursive validation of data against a schema
- ErrorReporter: Flattening and rendering of error trees
- schema_from_definition / load_schema: Schemas from declarative definitions
"""

from .base import (
    ArrayDescriptor,
    DateDescriptor,
    FileDescriptor,
    StringDescriptor,
    TypedDescriptor,
    UntypedDescriptor,
    field,
    is_empty,
    start_of_today,
)
from .definitions import DEFINITION_SCHEMA, load_schema, schema_from_definition
from .messages import DEFAULT_MESSAGES, build_default_message, get_message
from .reporter import ErrorReporter
from .ruleset import Schema, validate

__all__ = [
    "field",
    "is_empty",
    "start_of_today",
    "UntypedDescriptor",
    "TypedDescriptor",
    "StringDescriptor",
    "ArrayDescriptor",
    "FileDescriptor",
    "DateDescriptor",
    "Schema",
    "validate",
    "ErrorReporter",
    "DEFAULT_MESSAGES",
    "build_default_message",
    "get_message",
    "DEFINITION_SCHEMA",
    "schema_from_definition",
    "load_schema",
]
