"""
Tests for schema validation.

This module covers recursive validation of nested schemas, the sparse shape of
the error tree, data lookup on mappings and objects, and malformed schemas.
"""

from dataclasses import dataclass
from typing import Optional

import pytest

from fieldcheck.core.exceptions import SchemaError
from fieldcheck.validation.base import field
from fieldcheck.validation.ruleset import Schema, validate


def test_nested_errors_mirror_schema(person_schema):
    data = {"name": "", "address": {"city": ""}}
    assert validate(person_schema, data) == {
        "name": ["Name is required"],
        "address": {"city": ["City is required"]},
    }


def test_valid_data_returns_empty_map(person_schema):
    assert validate(person_schema, {"name": "Ann", "address": {"city": "Rome"}}) == {}


def test_passing_fields_are_absent(person_schema):
    errors = validate(person_schema, {"name": "Ann", "address": {"city": " "}})
    assert errors == {"address": {"city": ["City is required"]}}
    assert "name" not in errors


def test_missing_keys_are_treated_as_absent(person_schema):
    assert validate(person_schema, {}) == {
        "name": ["Name is required"],
        "address": {"city": ["City is required"]},
    }


def test_missing_nested_object_reports_inner_fields(person_schema):
    errors = validate(person_schema, {"name": "Ann", "address": None})
    assert errors == {"address": {"city": ["City is required"]}}


def test_error_keys_follow_schema_order():
    schema = {
        "b": field("b").string().required(),
        "a": field("a").string().required(),
        "c": field("c").string().required(),
    }
    assert list(validate(schema, {})) == ["b", "a", "c"]


def test_validate_is_idempotent(person_schema):
    data = {"name": "", "address": {"city": ""}}
    first = validate(person_schema, data)
    second = validate(person_schema, data)
    assert first == second
    assert data == {"name": "", "address": {"city": ""}}


def test_extra_data_keys_are_ignored(person_schema):
    data = {"name": "Ann", "address": {"city": "Rome", "zip": ""}, "age": 0}
    assert validate(person_schema, data) == {}


def test_validates_object_attributes(person_schema):
    @dataclass
    class Address:
        city: str

    @dataclass
    class Person:
        name: str
        address: Optional[Address]

    assert validate(person_schema, Person("", Address("Rome"))) == {"name": ["Name is required"]}
    assert validate(person_schema, Person("Ann", None)) == {
        "address": {"city": ["City is required"]}
    }


def test_untyped_descriptor_entry_raises():
    with pytest.raises(SchemaError, match="has no kind"):
        validate({"name": field("name")}, {"name": "Ann"})


def test_invalid_entry_raises():
    with pytest.raises(SchemaError, match="Invalid schema entry for field 'name'"):
        validate({"name": "required"}, {"name": "Ann"})


class TestSchema:
    """Tests for the Schema mapping wrapper."""

    def test_schema_is_read_only_mapping(self, person_schema):
        schema = Schema(person_schema)
        assert list(schema) == ["name", "address"]
        assert len(schema) == 2
        assert schema["name"] is person_schema["name"]
        assert isinstance(schema["address"], Schema)
        with pytest.raises(TypeError):
            schema["name"] = field("name").string()

    def test_schema_validate(self, person_schema):
        schema = Schema(person_schema)
        assert schema.validate({"name": "", "address": {"city": "Rome"}}) == {
            "name": ["Name is required"]
        }
        assert schema.is_valid({"name": "Ann", "address": {"city": "Rome"}})
        assert not schema.is_valid({})

    def test_schema_rejects_invalid_entries(self):
        with pytest.raises(SchemaError):
            Schema({"name": field("name")})

    def test_fields_returns_copy(self, person_schema):
        schema = Schema(person_schema)
        fields = schema.fields
        fields.pop("name")
        assert "name" in schema


@pytest.mark.parametrize(
    "nested_value, field_name",
    [([], "count"), (["a"], "index"), ("Rome", "title"), ("Rome", "upper"), (3, "real")],
)
def test_builtin_values_have_no_fields(nested_value, field_name):
    """Test that methods of lists, strings and numbers are not read as fields."""
    schema = {"inner": {field_name: field(field_name).string().required()}}
    errors = validate(schema, {"inner": nested_value})
    assert errors == {"inner": {field_name: [f"{field_name.capitalize()} is required"]}}


def test_plain_object_attributes_are_fields():
    class Address:
        def __init__(self, city):
            self.city = city

        def describe(self):
            return self.city

    schema = {
        "city": field("city").string().required(),
        "describe": field("describe").string().required(),
    }
    assert validate(schema, Address("Rome")) == {"describe": ["Describe is required"]}
    assert validate(schema, Address(" ")) == {
        "city": ["City is required"],
        "describe": ["Describe is required"],
    }
