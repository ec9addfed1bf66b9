"""
Schema Validation Components for fieldcheck

This module applies a schema of field descriptors to a data object. A schema
maps field names to either a typed descriptor (a leaf) or another schema (a
nested object). Validation walks the schema in its own key order and returns a
sparse error tree mirroring its nesting:

    >>> schema = {
    ...     "name": field("name").string().required(),
    ...     "address": {"city": field("city").string().required()},
    ... }
    >>> validate(schema, {"name": "", "address": {"city": ""}})
    {'name': ['Name is required'], 'address': {'city': ['City is required']}}

Fields that pass are left out of the result, so an empty result means the
data is valid.
"""

import logging
from dataclasses import fields as dataclass_fields, is_dataclass
from typing import Any, Dict, Iterator, Mapping, Union

from ..core.exceptions import SchemaError
from ..core.types import ValidationErrors
from .base import TypedDescriptor, UntypedDescriptor

logger = logging.getLogger(__name__)

SchemaEntry = Union[TypedDescriptor, Mapping[str, Any]]


def _lookup(data: Any, key: str) -> Any:
    """
    Read a field from a mapping or a record object, None if absent.

    Only dataclass fields and instance attributes count as fields. Strings,
    lists and other built-in values have none, so every key is absent.
    """
    if data is None or isinstance(data, type):
        return None
    if isinstance(data, Mapping):
        return data.get(key)
    if is_dataclass(data):
        if key in {f.name for f in dataclass_fields(data)}:
            return getattr(data, key, None)
        return None
    return getattr(data, "__dict__", {}).get(key)


def validate(schema: Mapping[str, SchemaEntry], data: Any) -> ValidationErrors:
    """
    Validate data against a schema.

    Args:
        schema: Mapping of field names to descriptors or nested schemas
        data: Mapping or object holding the field values. A missing nested
            object is validated as an empty one.

    Returns:
        ValidationErrors: Messages for failing leaf fields and nested error
        maps for failing nested objects. Passing fields are absent.

    Raises:
        SchemaError: If a schema entry is neither a descriptor nor a mapping
    """
    errors: Dict[str, Any] = {}
    for field_name, entry in schema.items():
        value = _lookup(data, field_name)
        if isinstance(entry, TypedDescriptor):
            field_errors = entry.validate(value)
            if field_errors:
                errors[field_name] = field_errors
        elif isinstance(entry, Mapping):
            nested_errors = validate(entry, value)
            if nested_errors:
                errors[field_name] = nested_errors
        elif isinstance(entry, UntypedDescriptor):
            raise SchemaError(
                f"Field '{field_name}' has no kind; call string(), array(), "
                "file() or date() on it"
            )
        else:
            raise SchemaError(
                f"Invalid schema entry for field '{field_name}': "
                f"{type(entry).__name__}"
            )
    logger.debug(f"Validated {len(schema)} fields, {len(errors)} with errors")
    return errors


class Schema(Mapping):
    """
    Read-only schema of field descriptors and nested schemas.

    A thin wrapper over a mapping that checks its entries up front and keeps
    validation next to the schema it belongs to. Nested plain dicts are
    wrapped as well.

    Attributes:
        fields (Dict[str, SchemaEntry]): Entries in declaration order
    """

    def __init__(self, fields: Mapping[str, SchemaEntry]):
        """
        Initialize a schema.

        Args:
            fields: Mapping of field names to descriptors or nested schemas

        Raises:
            SchemaError: If an entry is neither a descriptor nor a mapping
        """
        self._fields: Dict[str, SchemaEntry] = {}
        for name, entry in fields.items():
            if isinstance(entry, TypedDescriptor) or isinstance(entry, Schema):
                self._fields[name] = entry
            elif isinstance(entry, Mapping):
                self._fields[name] = Schema(entry)
            else:
                raise SchemaError(
                    f"Invalid schema entry for field '{name}': {type(entry).__name__}"
                )

    @property
    def fields(self) -> Dict[str, SchemaEntry]:
        """Copy of the entries in declaration order."""
        return dict(self._fields)

    def __getitem__(self, key: str) -> SchemaEntry:
        return self._fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"Schema({list(self._fields)!r})"

    def validate(self, data: Any) -> ValidationErrors:
        """Validate data against this schema. See ``validate``."""
        return validate(self, data)

    def is_valid(self, data: Any) -> bool:
        """Return True when data produces no validation errors."""
        return not self.validate(data)
