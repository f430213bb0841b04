"""Validate documents against a Schema."""

import re
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Callable, Dict, List, Mapping, Tuple

from .models import FieldDescriptor, Schema

_OBJECT_ID = re.compile(r"^[0-9a-fA-F]{24}$")
_MISSING = object()


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


TYPE_CHECKS: Dict[str, Callable[[Any], bool]] = {
    "string": lambda v: isinstance(v, str),
    "number": lambda v: _is_number(v) and not isinstance(v, Decimal),
    "decimal": _is_number,
    "date": lambda v: isinstance(v, (date, datetime)),
    "boolean": lambda v: isinstance(v, bool),
    "buffer": lambda v: isinstance(v, (bytes, bytearray)),
    "bigint": lambda v: isinstance(v, int) and not isinstance(v, bool),
    "objectid": lambda v: isinstance(v, str) and bool(_OBJECT_ID.match(v)),
    "mixed": lambda v: True,
}


@dataclass
class DocumentIssue:
    """Validation issue found in a document."""

    code: str  # e.g., "REQUIRED", "TYPE_MISMATCH", "ENUM"
    path: str  # e.g., "address.city" or "hobbies.0.name"
    message: str
    details: dict = field(default_factory=dict)


def validate_document(schema: Schema, document: Mapping[str, Any], prefix: str = "") -> List[DocumentIssue]:
    """
    Validate a nested document against a schema.

    Args:
        schema: Schema to validate against
        document: Nested document (dotted schema paths are looked up by segment)
        prefix: Path prefix used in issue locations

    Returns:
        List of DocumentIssue objects (empty if validation passes)
    """
    issues: List[DocumentIssue] = []
    for path, descriptor in schema.paths.items():
        location = f"{prefix}{path}"
        value = _lookup(document, path.split("."))
        if value is _MISSING or value is None:
            if descriptor.required:
                issues.append(
                    DocumentIssue(code="REQUIRED", path=location, message=f"{location}: path is required")
                )
            continue
        issues.extend(_check_value(location, descriptor, value))
    return issues


def _lookup(document: Any, segments: List[str]) -> Any:
    node = document
    for segment in segments:
        if not isinstance(node, Mapping) or segment not in node:
            return _MISSING
        node = node[segment]
    return node


def _check_value(location: str, descriptor: FieldDescriptor, value: Any) -> List[DocumentIssue]:
    if descriptor.type == "embedded":
        if not isinstance(value, Mapping):
            return [_type_issue(location, descriptor, value)]
        return validate_document(descriptor.sub_schema, value, prefix=f"{location}.")

    if descriptor.type == "array":
        if not isinstance(value, (list, tuple)):
            return [_type_issue(location, descriptor, value)]
        issues: List[DocumentIssue] = []
        for index, item in enumerate(value):
            item_location = f"{location}.{index}"
            if descriptor.sub_schema is not None:
                if not isinstance(item, Mapping):
                    issues.append(_type_issue(item_location, FieldDescriptor(type="mixed"), item, "embedded"))
                    continue
                issues.extend(validate_document(descriptor.sub_schema, item, prefix=f"{item_location}."))
            elif item is not None:
                issues.extend(_check_value(item_location, descriptor.element, item))
        return issues

    if not TYPE_CHECKS[descriptor.type](value):
        return [_type_issue(location, descriptor, value)]

    issues = []
    if descriptor.enum and value not in descriptor.enum:
        issues.append(
            DocumentIssue(
                code="ENUM",
                path=location,
                message=f"{location}: {value!r} is not a valid enum value",
                details={"enum": list(descriptor.enum)},
            )
        )
    low, high = _bound_value(descriptor.min), _bound_value(descriptor.max)
    if low is not None and _compare(value, low) < 0:
        issues.append(
            DocumentIssue(code="MIN", path=location, message=f"{location}: {value!r} is less than minimum {low!r}")
        )
    if high is not None and _compare(value, high) > 0:
        issues.append(
            DocumentIssue(code="MAX", path=location, message=f"{location}: {value!r} is more than maximum {high!r}")
        )
    if isinstance(value, str):
        min_length, max_length = _bound_value(descriptor.min_length), _bound_value(descriptor.max_length)
        if min_length is not None and len(value) < min_length:
            issues.append(
                DocumentIssue(
                    code="MIN_LENGTH",
                    path=location,
                    message=f"{location}: length {len(value)} is shorter than {min_length}",
                )
            )
        if max_length is not None and len(value) > max_length:
            issues.append(
                DocumentIssue(
                    code="MAX_LENGTH",
                    path=location,
                    message=f"{location}: length {len(value)} is longer than {max_length}",
                )
            )
    return issues


def _bound_value(bound: Any) -> Any:
    if isinstance(bound, (tuple, list)):
        return bound[0]
    return bound


def _compare(value: Any, bound: Any) -> int:
    left, right = _comparable(value, bound)
    return (left > right) - (left < right)


def _comparable(value: Any, bound: Any) -> Tuple[Any, Any]:
    # datetime and date do not compare with each other
    if isinstance(value, datetime) and not isinstance(bound, datetime) and isinstance(bound, date):
        return value.date(), bound
    if isinstance(bound, datetime) and not isinstance(value, datetime) and isinstance(value, date):
        return value, bound.date()
    return value, bound


def _type_issue(location: str, descriptor: FieldDescriptor, value: Any, expected: str = "") -> DocumentIssue:
    expected = expected or descriptor.type
    return DocumentIssue(
        code="TYPE_MISMATCH",
        path=location,
        message=f"{location}: expected {expected}, got {type(value).__name__}",
        details={"expected": expected, "actual": type(value).__name__},
    )
