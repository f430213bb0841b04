"""Build a Schema from a pydantic model class."""

import inspect
import math
import types
from datetime import date, datetime, timedelta
from decimal import Decimal
from enum import Enum
from typing import Any, Annotated, Dict, Iterable, List, Literal, Tuple, Type, Union, get_args, get_origin
from uuid import UUID

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from .definition import SchemaDefinitionError
from .models import FieldDescriptor, Schema
from .types import tag_for_python_type, tag_for_value
from docmock.config.logging import get_logger

logger = get_logger(__name__)

_UNION_TYPES = (Union, types.UnionType)


def schema_from_model(model: Type[BaseModel]) -> Schema:
    """
    Introspect a pydantic model class into a Schema.

    Field keys use the field alias when one is set, so generated documents
    validate with ``model.model_validate``. Constraints declared through
    ``Field(ge=..., le=..., min_length=..., max_length=...)`` become
    descriptor bounds; ``gt``/``lt`` become the nearest inclusive value (the
    next integer for int fields, the adjacent float for float fields).

    Args:
        model: pydantic BaseModel subclass

    Returns:
        Schema describing the model

    Raises:
        SchemaDefinitionError: If an annotation has no mapping or the model
            refers to itself
    """
    return _schema_from_model(model, ())


def _schema_from_model(model: Type[BaseModel], stack: Tuple[type, ...]) -> Schema:
    if model in stack:
        raise SchemaDefinitionError(model.__name__, "self-referential models are not supported")
    stack = stack + (model,)

    paths: Dict[str, FieldDescriptor] = {}
    for name, info in model.model_fields.items():
        key = info.alias or name
        descriptor = _describe(key, info.annotation, stack)
        updates = _constraints(info.metadata, _is_continuous(info.annotation))
        updates["required"] = info.is_required()
        paths[key] = descriptor.model_copy(update=updates)
    logger.debug(f"Introspected {model.__name__}: {len(paths)} fields")
    return Schema(paths=paths)


def _describe(key: str, annotation: Any, stack: Tuple[type, ...]) -> FieldDescriptor:
    origin = get_origin(annotation)
    args = get_args(annotation)

    if origin is Annotated:
        descriptor = _describe(key, args[0], stack)
        updates = _constraints(_flatten_metadata(args[1:]), _is_continuous(args[0]))
        return descriptor.model_copy(update=updates) if updates else descriptor

    if origin in _UNION_TYPES:
        options = [arg for arg in args if arg is not type(None)]
        if len(options) == 1:
            return _describe(key, options[0], stack)
        return FieldDescriptor(type="mixed")

    if origin is Literal:
        values = list(args)
        return FieldDescriptor(type=tag_for_value(values[0]), enum=values)

    if origin is list or annotation is list:
        item = args[0] if args else Any
        element = _describe(key, item, stack)
        if element.type == "embedded":
            return FieldDescriptor(type="array", sub_schema=element.sub_schema)
        return FieldDescriptor(type="array", element=element)

    if inspect.isclass(annotation):
        if issubclass(annotation, BaseModel):
            return FieldDescriptor(type="embedded", sub_schema=_schema_from_model(annotation, stack))
        if issubclass(annotation, Enum):
            values = [member.value for member in annotation]
            return FieldDescriptor(type=tag_for_value(values[0]), enum=values)
        if issubclass(annotation, UUID):
            return FieldDescriptor(type="string", provider="faker.uuid4")
        if annotation is date:
            # Date-only fields reject datetimes with a time component
            return FieldDescriptor(type="date", provider="faker.date_object")

    tag = tag_for_python_type(annotation)
    if tag is None or tag == "array":
        raise SchemaDefinitionError(key, f"unsupported annotation {annotation!r}")
    return FieldDescriptor(type=tag)


def _flatten_metadata(items: Iterable[Any]) -> List[Any]:
    flat: List[Any] = []
    for item in items:
        if isinstance(item, FieldInfo):
            flat.extend(item.metadata)
        else:
            flat.append(item)
    return flat


def _is_continuous(annotation: Any) -> bool:
    """True for float and Decimal fields, seen through Optional and Annotated."""
    origin = get_origin(annotation)
    if origin is Annotated:
        return _is_continuous(get_args(annotation)[0])
    if origin in _UNION_TYPES:
        options = [arg for arg in get_args(annotation) if arg is not type(None)]
        return len(options) == 1 and _is_continuous(options[0])
    return annotation in (float, Decimal)


def _constraints(metadata: Iterable[Any], continuous: bool = False) -> Dict[str, Any]:
    """Translate annotated-types style constraint objects into descriptor bounds."""
    updates: Dict[str, Any] = {}
    for item in metadata:
        if getattr(item, "ge", None) is not None:
            updates["min"] = item.ge
        if getattr(item, "gt", None) is not None:
            updates["min"] = _above(item.gt, continuous)
        if getattr(item, "le", None) is not None:
            updates["max"] = item.le
        if getattr(item, "lt", None) is not None:
            updates["max"] = _below(item.lt, continuous)
        if getattr(item, "min_length", None) is not None:
            updates["min_length"] = item.min_length
        if getattr(item, "max_length", None) is not None:
            updates["max_length"] = item.max_length
    return updates


# Exclusive bounds become the nearest inclusive value of the field's kind:
# a microsecond for datetimes, a day for dates, the adjacent float for
# float/Decimal fields and the next integer otherwise.
def _above(value: Any, continuous: bool) -> Any:
    if isinstance(value, datetime):
        return value + timedelta(microseconds=1)
    if isinstance(value, date):
        return value + timedelta(days=1)
    if continuous:
        return math.nextafter(float(value), math.inf)
    return math.floor(value) + 1


def _below(value: Any, continuous: bool) -> Any:
    if isinstance(value, datetime):
        return value - timedelta(microseconds=1)
    if isinstance(value, date):
        return value - timedelta(days=1)
    if continuous:
        return math.nextafter(float(value), -math.inf)
    return math.ceil(value) - 1
