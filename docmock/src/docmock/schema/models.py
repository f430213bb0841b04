"""Schema and field descriptor models."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional
from pydantic import BaseModel, Field, model_validator

from .types import TypeTag

# A bound is either a bare value or a (value, message) pair
Bound = Any


class FieldDescriptor(BaseModel):
    """Per-field metadata: type tag, required flag, validators, nested schema."""

    type: TypeTag
    required: bool = False
    enum: Optional[List[Any]] = None
    min: Optional[Bound] = None
    max: Optional[Bound] = None
    min_length: Optional[Bound] = None
    max_length: Optional[Bound] = None
    sub_schema: Optional[Schema] = None  # embedded document, or array of documents
    element: Optional[FieldDescriptor] = None  # array of primitives
    provider: Optional[str] = None  # explicit provider name, e.g. "faker.company"

    @model_validator(mode="after")
    def check_structure(self) -> "FieldDescriptor":
        """Embedded fields need a schema; arrays need a schema or an element."""
        if self.type == "embedded" and self.sub_schema is None:
            raise ValueError("embedded field requires a sub_schema")
        if self.type == "array" and self.sub_schema is None and self.element is None:
            raise ValueError("array field requires a sub_schema or an element descriptor")
        return self


class Schema(BaseModel):
    """
    Ordered mapping of field path to FieldDescriptor.

    Paths may be dotted ("address.city"); they are rebuilt into nested
    objects when a document is assembled.
    """

    paths: Dict[str, FieldDescriptor] = Field(default_factory=dict)

    @classmethod
    def from_definition(cls, definition: Mapping[str, Any]) -> "Schema":
        """Build a schema from a declarative definition mapping."""
        from .definition import parse_definition

        return cls(paths=parse_definition(definition))

    def add(self, definition: Mapping[str, Any], prefix: str = "") -> "Schema":
        """Add the fields of a declarative definition to this schema in place."""
        from .definition import parse_definition

        self.paths.update(parse_definition(definition, prefix=prefix))
        return self

    def clone(self) -> "Schema":
        """Deep copy of this schema."""
        return self.model_copy(deep=True)

    def path(self, name: str) -> Optional[FieldDescriptor]:
        return self.paths.get(name)

    def required_paths(self) -> List[str]:
        return [name for name, field in self.paths.items() if field.required]


FieldDescriptor.model_rebuild()
Schema.model_rebuild()
