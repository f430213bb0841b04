"""Type tags for schema fields."""

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, Literal, Optional, get_args

TypeTag = Literal[
    "string",
    "number",
    "decimal",
    "date",
    "boolean",
    "buffer",
    "bigint",
    "objectid",
    "embedded",
    "array",
    "mixed",
]

TYPE_TAGS = frozenset(get_args(TypeTag))

# Tags that hold a nested schema or element descriptor instead of a value
STRUCTURAL_TAGS = frozenset({"embedded", "array"})

# Spellings accepted in declarative definitions (compared lowercase)
TYPE_NAME_ALIASES: Dict[str, TypeTag] = {
    "string": "string",
    "str": "string",
    "text": "string",
    "number": "number",
    "int": "number",
    "integer": "number",
    "float": "number",
    "decimal": "decimal",
    "decimal128": "decimal",
    "date": "date",
    "datetime": "date",
    "boolean": "boolean",
    "bool": "boolean",
    "buffer": "buffer",
    "bytes": "buffer",
    "binary": "buffer",
    "bigint": "bigint",
    "objectid": "objectid",
    "object_id": "objectid",
    "mixed": "mixed",
    "any": "mixed",
    "object": "mixed",
    "array": "array",
    "list": "array",
}

# Python types accepted in declarative definitions; bool precedes int
PYTHON_TYPE_TAGS = (
    (bool, "boolean"),
    (int, "number"),
    (float, "number"),
    (Decimal, "decimal"),
    (datetime, "date"),
    (date, "date"),
    (str, "string"),
    (bytes, "buffer"),
    (bytearray, "buffer"),
    (list, "array"),
    (dict, "mixed"),
    (object, "mixed"),
)


def tag_for_python_type(py_type: Any) -> Optional[TypeTag]:
    """Return the tag for a Python type, or None if it has no direct mapping."""
    if py_type is Any:
        return "mixed"
    for candidate, tag in PYTHON_TYPE_TAGS:
        if py_type is candidate:
            return tag
    return None


def tag_for_value(value: Any) -> TypeTag:
    """Infer a tag from a literal value (used for Literal and Enum candidates)."""
    for candidate, tag in PYTHON_TYPE_TAGS:
        if isinstance(value, candidate):
            return tag
    return "mixed"


def tag_for_name(name: str) -> Optional[TypeTag]:
    """Resolve a declarative type name such as "String" or "Decimal128"."""
    return TYPE_NAME_ALIASES.get(name.strip().lower())
