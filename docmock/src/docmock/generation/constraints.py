"""Constraint extraction from field descriptors."""

from dataclasses import dataclass
from typing import Any, Optional, Tuple

from docmock.schema.models import FieldDescriptor


@dataclass(frozen=True)
class ConstraintSet:
    """Normalized per-field constraints. ``None`` means unset; zero is a bound."""

    enum: Optional[Tuple[Any, ...]] = None
    min: Optional[Any] = None
    max: Optional[Any] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None

    @property
    def has_enum(self) -> bool:
        return bool(self.enum)

    @property
    def has_bounds(self) -> bool:
        return self.min is not None or self.max is not None

    @property
    def has_length(self) -> bool:
        return self.min_length is not None or self.max_length is not None


def bound_value(bound: Any) -> Any:
    """
    Extract the value of a bound declared bare or as a (value, message) pair.

    >>> bound_value(10)
    10
    >>> bound_value((10, "Too young"))
    10
    """
    if isinstance(bound, (tuple, list)):
        return bound[0] if bound else None
    return bound


def extract_constraints(descriptor: FieldDescriptor) -> ConstraintSet:
    """
    Read a descriptor's declared validators into a ConstraintSet.

    Messages attached to bounds are discarded; absent validators stay None.

    Args:
        descriptor: Field descriptor

    Returns:
        ConstraintSet for the field
    """
    return ConstraintSet(
        enum=tuple(descriptor.enum) if descriptor.enum is not None else None,
        min=bound_value(descriptor.min),
        max=bound_value(descriptor.max),
        min_length=bound_value(descriptor.min_length),
        max_length=bound_value(descriptor.max_length),
    )
