"""Parser for declarative schema definitions.

A definition is a mapping of field name to field spec, in the style of
document-database schema libraries::

    {
        "email": {"type": "String", "required": True},
        "age": {"type": int, "min": [18, "Too young"], "max": 120},
        "address": address_schema,            # embedded document
        "tags": [str],                        # array of primitives
        "hobbies": [{"name": str}],           # array of sub-documents
        "profile": {"bio": str, "links": {"homepage": str}},  # dotted paths
    }

Plain nested mappings without a "type" key are flattened into dotted paths
("profile.links.homepage"). An embedded document is declared with a Schema
value or ``{"type": {...}}``.
"""

from typing import Any, Dict, List, Mapping

from .models import FieldDescriptor, Schema
from .types import tag_for_name, tag_for_python_type
from docmock.config.logging import get_logger

logger = get_logger(__name__)

# Option keys and the descriptor attribute each one maps to
FIELD_OPTIONS = {
    "required": "required",
    "enum": "enum",
    "min": "min",
    "max": "max",
    "minLength": "min_length",
    "min_length": "min_length",
    "maxLength": "max_length",
    "max_length": "max_length",
    "provider": "provider",
}


class SchemaDefinitionError(ValueError):
    """Raised when a schema definition cannot be interpreted."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


def parse_definition(definition: Mapping[str, Any], prefix: str = "") -> Dict[str, FieldDescriptor]:
    """
    Flatten a definition mapping into ordered field paths.

    Args:
        definition: Declarative definition
        prefix: Path prefix for nested plain mappings (e.g. "profile.")

    Returns:
        Ordered dict of dotted path -> FieldDescriptor
    """
    if not isinstance(definition, Mapping):
        raise SchemaDefinitionError(prefix.rstrip("."), "definition must be a mapping")

    paths: Dict[str, FieldDescriptor] = {}
    for name, spec in definition.items():
        path = f"{prefix}{name}"
        if isinstance(spec, Mapping) and spec and not _is_field_options(spec):
            paths.update(parse_definition(spec, prefix=f"{path}."))
        else:
            paths[path] = _parse_field(path, spec)
    return paths


def _is_field_options(spec: Mapping[str, Any]) -> bool:
    return "type" in spec


def _parse_field(path: str, spec: Any) -> FieldDescriptor:
    if isinstance(spec, Mapping) and _is_field_options(spec):
        descriptor = _parse_type(path, spec["type"])
        updates = _parse_options(path, spec)
        return descriptor.model_copy(update=updates) if updates else descriptor
    if isinstance(spec, Mapping):
        # Empty mapping: untyped value
        return FieldDescriptor(type="mixed")
    return _parse_type(path, spec)


def _parse_options(path: str, spec: Mapping[str, Any]) -> Dict[str, Any]:
    updates: Dict[str, Any] = {}
    for key, value in spec.items():
        if key == "type":
            continue
        attr = FIELD_OPTIONS.get(key)
        if attr is None:
            logger.debug(f"Ignoring unsupported option '{key}' on {path}")
            continue
        if attr == "enum":
            if not isinstance(value, (list, tuple, set, frozenset)):
                raise SchemaDefinitionError(path, "enum must be a list of candidate values")
            value = list(value)
        elif attr in ("min", "max", "min_length", "max_length") and isinstance(value, list):
            # [value, message] pair
            if len(value) != 2:
                raise SchemaDefinitionError(path, f"{key} must be a value or a [value, message] pair")
            value = tuple(value)
        elif attr == "required":
            value = bool(value)
        updates[attr] = value
    return updates


def _parse_type(path: str, type_spec: Any) -> FieldDescriptor:
    if isinstance(type_spec, Schema):
        return FieldDescriptor(type="embedded", sub_schema=type_spec)
    if isinstance(type_spec, Mapping):
        # {"type": {...}} declares a single nested sub-document
        return FieldDescriptor(
            type="embedded", sub_schema=Schema(paths=parse_definition(type_spec))
        )
    if isinstance(type_spec, (list, tuple)):
        return _parse_array(path, list(type_spec))

    tag = None
    if isinstance(type_spec, str):
        tag = tag_for_name(type_spec)
    elif isinstance(type_spec, type) or type_spec is Any:
        tag = tag_for_python_type(type_spec)

    if tag is None:
        raise SchemaDefinitionError(path, f"unknown field type {type_spec!r}")
    if tag == "array":
        return FieldDescriptor(type="array", element=FieldDescriptor(type="mixed"))
    return FieldDescriptor(type=tag)


def _parse_array(path: str, items: List[Any]) -> FieldDescriptor:
    if not items:
        return FieldDescriptor(type="array", element=FieldDescriptor(type="mixed"))
    if len(items) > 1:
        raise SchemaDefinitionError(path, "array definitions take exactly one element type")

    item = items[0]
    if isinstance(item, Mapping) and item and not _is_field_options(item):
        # Array of plain objects: implicit sub-document schema
        return FieldDescriptor(type="array", sub_schema=Schema(paths=parse_definition(item)))

    element = _parse_field(path, item)
    if element.type == "embedded":
        return FieldDescriptor(type="array", sub_schema=element.sub_schema)
    return FieldDescriptor(type="array", element=element)
