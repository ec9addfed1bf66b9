"""
Field Builder Components for fieldcheck

This module provides the builder used to describe how a single field is
validated. A field starts untyped (just a name) and is narrowed into a concrete
kind by one of the kind selectors:

    >>> name = field("first_name").string().required()
    >>> name.validate("   ")
    ['First name is required']

Every typed descriptor supports:
- The shared required rule, with an optional message override
- Custom criteria, run in registration order after the required rule

Date descriptors additionally support ``only_future``.

Descriptors are immutable. Each configuration method returns a new descriptor,
so a descriptor can be shared between schemas and validated from several
threads at once.
"""

import logging
from dataclasses import dataclass, field as dataclass_field, replace
from datetime import date, datetime, time
from types import MappingProxyType
from typing import Any, List, Mapping, Optional, Tuple, TypeVar

from ..core.enums import FieldType
from ..core.types import Criteria, CustomValidator
from ..utils.assertions import assert_that
from .messages import build_default_message, get_message

logger = logging.getLogger(__name__)

D = TypeVar("D", bound="TypedDescriptor")


def is_empty(value: Any) -> bool:
    """
    Check whether a value fails the required rule.

    Only absence, blank strings and empty lists, tuples or sets count as
    empty. Zero, False, NaN and empty mappings are values like any other.

    Args:
        value: Value to inspect

    Returns:
        bool: True if the value is considered missing
    """
    if value is None:
        return True
    if isinstance(value, str):
        return len(value.strip()) == 0
    if isinstance(value, (list, tuple, set, frozenset)):
        return len(value) == 0
    return False


@dataclass(frozen=True)
class TypedDescriptor:
    """
    Validation rules for one field of a known kind.

    Instances are created through ``field(name).<kind>()`` rather than
    directly. Configuration methods return a modified copy.

    Attributes:
        field_name (str): Name of the validated field, used in messages
        criteria (Criteria): Built-in rules and the kind tag
        custom_criteria (Tuple[CustomValidator, ...]): Extra checks in order
        messages (Mapping[str, str]): Message overrides keyed by criterion
    """

    field_name: str
    criteria: Criteria = Criteria()
    custom_criteria: Tuple[CustomValidator, ...] = ()
    messages: Mapping[str, str] = dataclass_field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )

    @property
    def kind(self) -> FieldType:
        """Kind tag of this descriptor."""
        return self.criteria.type

    def required(self: D, message: Optional[str] = None) -> D:
        """
        Mark the field as mandatory.

        Args:
            message: Text reported instead of "<Field> is required"

        Returns:
            A descriptor of the same kind with the required rule enabled
        """
        changes = {"criteria": replace(self.criteria, required=True)}
        if message:
            changes["messages"] = MappingProxyType({**self.messages, "required": message})
        return replace(self, **changes)

    def custom(self: D, validator: CustomValidator) -> D:
        """
        Register a custom criterion.

        Args:
            validator: Callable returning an error message, or None when the
                value is acceptable

        Returns:
            A descriptor of the same kind with the criterion appended
        """
        return replace(self, custom_criteria=self.custom_criteria + (validator,))

    def validate(self, value: Any) -> List[str]:
        """
        Validate a value against the configured rules.

        The required rule runs first, then every custom criterion in the
        order it was registered. All criteria run even when an earlier one
        failed.

        Args:
            value: Value of the field, None when absent

        Returns:
            List[str]: Error messages in evaluation order, empty if valid

        Raises:
            FieldAssertionError: If the descriptor has no field name
        """
        errors: List[str] = []
        if self.criteria.required and is_empty(value):
            assert_that(self.field_name is not None, "Field name not specified")
            errors.append(get_message(self.messages, "required", self.field_name))
        for check in self.custom_criteria:
            error = check(value)
            if error is None:
                continue
            errors.append(error)
        return errors


@dataclass(frozen=True)
class StringDescriptor(TypedDescriptor):
    """Descriptor for text fields."""


@dataclass(frozen=True)
class ArrayDescriptor(TypedDescriptor):
    """Descriptor for list, tuple and set fields."""


@dataclass(frozen=True)
class FileDescriptor(TypedDescriptor):
    """Descriptor for uploaded file fields."""


def start_of_today() -> datetime:
    """Return local midnight of the current calendar day."""
    return datetime.combine(date.today(), time.min)


def _to_local_datetime(value: Any) -> Optional[datetime]:
    """Interpret a date-like value as a naive local datetime, None if impossible."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone().replace(tzinfo=None)
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return _to_local_datetime(datetime.fromisoformat(text))
        except ValueError:
            return None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return datetime.fromtimestamp(value)
        except (OverflowError, OSError, ValueError):
            return None
    return None


@dataclass(frozen=True)
class DateDescriptor(TypedDescriptor):
    """
    Descriptor for date fields.

    Accepts ``datetime`` and ``date`` objects, ISO-8601 strings and POSIX
    timestamps in seconds.
    """

    def only_future(self, message: Optional[str] = None) -> "DateDescriptor":
        """
        Reject dates before the start of the current day.

        A missing value passes; use ``required`` to reject absence.

        Args:
            message: Text reported instead of "<Field> can't be in the past"

        Returns:
            A date descriptor with the check appended
        """
        field_name = self.field_name

        def check_not_past(value: Any) -> Optional[str]:
            if is_empty(value):
                return None
            moment = _to_local_datetime(value)
            if moment is None:
                logger.warning(
                    f"Cannot interpret {value!r} as a date for field {field_name}, "
                    "skipping past-date check"
                )
                return None
            if moment < start_of_today():
                return message or build_default_message("only_future", field_name)
            return None

        return self.custom(check_not_past)


@dataclass(frozen=True)
class UntypedDescriptor:
    """
    A named field whose kind has not been selected yet.

    Attributes:
        field_name (str): Name of the field
    """

    field_name: str

    def string(self) -> StringDescriptor:
        """Narrow to a text field."""
        return StringDescriptor(self.field_name, Criteria(type=FieldType.STRING))

    def array(self) -> ArrayDescriptor:
        """Narrow to a list, tuple or set field."""
        return ArrayDescriptor(self.field_name, Criteria(type=FieldType.ARRAY))

    def file(self) -> FileDescriptor:
        """Narrow to a file field."""
        return FileDescriptor(self.field_name, Criteria(type=FieldType.FILE))

    def date(self) -> DateDescriptor:
        """Narrow to a date field."""
        return DateDescriptor(self.field_name, Criteria(type=FieldType.DATE))


def field(field_name: str) -> UntypedDescriptor:
    """
    Start describing a field.

    Args:
        field_name: Name of the field, shown in messages via field_readable

    Returns:
        UntypedDescriptor: Builder exposing string(), array(), file() and date()
    """
    return UntypedDescriptor(field_name)
