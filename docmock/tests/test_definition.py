"""Tests for declarative schema definitions."""

from datetime import date, datetime
from decimal import Decimal
from typing import Any

import pytest
from pydantic import ValidationError

from docmock.schema.definition import SchemaDefinitionError
from docmock.schema.models import FieldDescriptor, Schema


@pytest.mark.parametrize(
    "type_spec, expected",
    [
        (str, "string"),
        ("String", "string"),
        (int, "number"),
        (float, "number"),
        ("Number", "number"),
        (Decimal, "decimal"),
        ("Decimal128", "decimal"),
        (datetime, "date"),
        (date, "date"),
        ("Date", "date"),
        (bool, "boolean"),
        ("Boolean", "boolean"),
        (bytes, "buffer"),
        ("Buffer", "buffer"),
        ("BigInt", "bigint"),
        ("ObjectId", "objectid"),
        ("Mixed", "mixed"),
        (Any, "mixed"),
    ],
)
def test_bare_types(type_spec, expected):
    """Bare types and type names resolve to tags."""
    schema = Schema.from_definition({"field": type_spec})
    assert schema.paths["field"].type == expected


def test_field_options():
    """Options map onto descriptor attributes."""
    schema = Schema.from_definition(
        {
            "email": {"type": "String", "required": True},
            "age": {"type": int, "min": [10, "Too young"], "max": 100},
            "lastName": {"type": str, "minLength": 5, "maxLength": 200},
            "nickname": {"type": str, "min_length": 2, "max_length": 8},
            "accountType": {"type": str, "enum": ["Savings", "Personal"]},
            "company": {"type": str, "provider": "faker.company"},
        }
    )
    assert schema.paths["email"].required is True
    assert schema.paths["age"].min == (10, "Too young")
    assert schema.paths["age"].max == 100
    assert schema.paths["lastName"].min_length == 5
    assert schema.paths["lastName"].max_length == 200
    assert schema.paths["nickname"].min_length == 2
    assert schema.paths["accountType"].enum == ["Savings", "Personal"]
    assert schema.paths["company"].provider == "faker.company"
    assert schema.required_paths() == ["email"]


def test_unsupported_options_ignored():
    """Options with no generation meaning are ignored."""
    schema = Schema.from_definition({"slug": {"type": str, "unique": True, "index": True}})
    assert schema.paths["slug"] == FieldDescriptor(type="string")


def test_nested_mappings_flatten_to_dotted_paths():
    """Plain nested mappings become dotted paths in declared order."""
    schema = Schema.from_definition(
        {
            "field1": {
                "field2": {"field4": "Date", "field6": {"field7": {"type": str, "enum": ["a", "b"]}}},
                "field3": "Number",
            },
            "last": str,
        }
    )
    assert list(schema.paths) == [
        "field1.field2.field4",
        "field1.field2.field6.field7",
        "field1.field3",
        "last",
    ]
    assert schema.paths["field1.field2.field6.field7"].enum == ["a", "b"]


def test_embedded_schema_value():
    """A Schema value declares an embedded document."""
    address = Schema.from_definition({"street": str, "city": str})
    schema = Schema.from_definition({"address": address, "billing": {"type": address, "required": True}})
    assert schema.paths["address"].type == "embedded"
    assert schema.paths["address"].sub_schema is address
    assert schema.paths["billing"].required is True
    assert schema.paths["billing"].sub_schema is address


def test_embedded_type_mapping():
    """{"type": {...}} declares an inline embedded document."""
    schema = Schema.from_definition({"profile": {"type": {"bio": str}, "required": True}})
    profile = schema.paths["profile"]
    assert profile.type == "embedded"
    assert profile.required is True
    assert list(profile.sub_schema.paths) == ["bio"]


def test_array_forms():
    """Arrays of primitives, of plain objects and of schemas."""
    hobby = Schema.from_definition({"name": str})
    schema = Schema.from_definition(
        {
            "tags": [str],
            "scores": [{"type": int, "min": 0, "max": 10}],
            "hobbies": [{"name": str, "years": int}],
            "pets": [hobby],
            "accounts": {"type": [str], "required": True},
            "anything": [],
            "matrix": [[int]],
        }
    )
    assert schema.paths["tags"].element.type == "string"
    assert schema.paths["scores"].element.max == 10
    assert list(schema.paths["hobbies"].sub_schema.paths) == ["name", "years"]
    assert schema.paths["pets"].sub_schema is hobby
    assert schema.paths["accounts"].type == "array"
    assert schema.paths["accounts"].required is True
    assert schema.paths["anything"].element.type == "mixed"
    assert schema.paths["matrix"].element.type == "array"
    assert schema.paths["matrix"].element.element.type == "number"


def test_array_with_two_types_rejected():
    """Arrays declare exactly one element type."""
    with pytest.raises(SchemaDefinitionError):
        Schema.from_definition({"mixed": [str, int]})


def test_unknown_type_rejected():
    """Unknown type names fail with the field path in the message."""
    with pytest.raises(SchemaDefinitionError) as exc_info:
        Schema.from_definition({"profile": {"age": "Integerish"}})
    assert "profile.age" in str(exc_info.value)


def test_malformed_bound_rejected():
    """Bound lists must be [value, message] pairs."""
    with pytest.raises(SchemaDefinitionError):
        Schema.from_definition({"age": {"type": int, "min": [1, 2, 3]}})


def test_empty_mapping_is_mixed():
    """An empty mapping is an untyped field."""
    assert Schema.from_definition({"extra": {}}).paths["extra"].type == "mixed"


def test_add_and_clone():
    """Clones are independent of the schema they were copied from."""
    base = Schema.from_definition({"firstName": str})
    extended = base.clone().add({"age": {"type": int, "min": 18}})
    assert list(base.paths) == ["firstName"]
    assert list(extended.paths) == ["firstName", "age"]


def test_add_with_prefix():
    """add() can place a definition under a path prefix."""
    schema = Schema.from_definition({"name": str}).add({"city": str}, prefix="address.")
    assert list(schema.paths) == ["name", "address.city"]


def test_structural_descriptors_need_structure():
    """Embedded and array descriptors without a schema or element are invalid."""
    with pytest.raises(ValidationError):
        FieldDescriptor(type="embedded")
    with pytest.raises(ValidationError):
        FieldDescriptor(type="array")
