"""
Declarative Schema Definitions for fieldcheck

This module builds schemas from plain data, so validation rules can live in
JSON configuration files instead of code. A definition maps field names to
either a leaf rule or a nested object:

    {
        "name": {"type": "string", "required": true},
        "starts_on": {"type": "date", "required": "Pick a date", "only_future": true},
        "address": {"fields": {"city": {"type": "string", "required": true}}}
    }

``required`` and ``only_future`` accept either ``true`` (default message) or a
non-empty string (message override). Definitions are checked against
``DEFINITION_SCHEMA`` with jsonschema before any descriptor is built.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Union

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

from ..core.exceptions import SchemaDefinitionError
from .base import TypedDescriptor, field
from .ruleset import Schema

logger = logging.getLogger(__name__)

DEFINITION_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "definitions": {
        "rule": {
            "anyOf": [{"type": "boolean"}, {"type": "string", "minLength": 1}]
        },
        "leaf": {
            "type": "object",
            "properties": {
                "type": {"enum": ["string", "array", "file", "date"]},
                "required": {"$ref": "#/definitions/rule"},
                "only_future": {"$ref": "#/definitions/rule"},
            },
            "required": ["type"],
            "additionalProperties": False,
        },
        "nested": {
            "type": "object",
            "properties": {"fields": {"$ref": "#/definitions/fields"}},
            "required": ["fields"],
            "additionalProperties": False,
        },
        "fields": {
            "type": "object",
            "additionalProperties": {
                "oneOf": [
                    {"$ref": "#/definitions/leaf"},
                    {"$ref": "#/definitions/nested"},
                ]
            },
        },
    },
    "$ref": "#/definitions/fields",
}


def _build_leaf(name: str, rule: Mapping[str, Any]) -> TypedDescriptor:
    kind = rule["type"]
    untyped = field(name)
    descriptor = getattr(untyped, kind)()

    required = rule.get("required", False)
    if required:
        descriptor = descriptor.required(required if isinstance(required, str) else None)

    only_future = rule.get("only_future", False)
    if only_future:
        if kind != "date":
            raise SchemaDefinitionError(
                f"only_future is only supported for date fields, not {kind}", name
            )
        descriptor = descriptor.only_future(
            only_future if isinstance(only_future, str) else None
        )
    return descriptor


def _build_fields(definition: Mapping[str, Any], prefix: str = "") -> Dict[str, Any]:
    entries: Dict[str, Any] = {}
    for name, rule in definition.items():
        path = f"{prefix}{name}"
        if "fields" in rule:
            entries[name] = Schema(_build_fields(rule["fields"], f"{path}."))
        else:
            try:
                entries[name] = _build_leaf(name, rule)
            except SchemaDefinitionError as e:
                raise SchemaDefinitionError(e.args[0], path) from e
    return entries


def schema_from_definition(definition: Mapping[str, Any]) -> Schema:
    """
    Build a schema from a declarative definition.

    Args:
        definition: Mapping in the format described by DEFINITION_SCHEMA

    Returns:
        Schema: Schema with one descriptor per leaf rule

    Raises:
        SchemaDefinitionError: If the definition does not match the format

    Example:
        >>> schema = schema_from_definition({"name": {"type": "string", "required": True}})
        >>> schema.validate({"name": ""})
        {'name': ['Name is required']}
    """
    try:
        json_validate(instance=definition, schema=DEFINITION_SCHEMA)
    except JsonSchemaError as e:
        path = ".".join(str(part) for part in e.absolute_path)
        raise SchemaDefinitionError(e.message, path) from e

    schema = Schema(_build_fields(definition))
    logger.debug(f"Built schema with {len(schema)} top-level fields")
    return schema


def load_schema(path: Union[str, Path]) -> Schema:
    """
    Load a schema definition from a JSON file.

    Args:
        path: Path to the JSON definition file

    Returns:
        Schema: Schema built from the file contents

    Raises:
        SchemaDefinitionError: If the file cannot be read, is not valid JSON,
            or does not match the definition format
    """
    definition_path = Path(path)
    try:
        with open(definition_path, "r", encoding="utf-8") as f:
            definition = json.load(f)
    except OSError as e:
        raise SchemaDefinitionError(f"Cannot read schema definition {definition_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise SchemaDefinitionError(f"Invalid JSON in {definition_path}: {e}") from e

    logger.debug(f"Loaded schema definition from {definition_path}")
    return schema_from_definition(definition)
