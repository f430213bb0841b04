"""Mock document generation engine."""

from .constraints import ConstraintSet, extract_constraints
from .dispatch import ValueDispatcher
from .engine import GenerationOptions, MockGenerator, generate_mock, resolve_schema
from .errors import (
    FieldGenerationError,
    InvalidSchemaError,
    MockGenerationError,
    PathConflictError,
    ProviderRegistrationError,
    SchemaDepthError,
)
from .unflatten import unflatten

__all__ = [
    "ConstraintSet",
    "extract_constraints",
    "ValueDispatcher",
    "GenerationOptions",
    "MockGenerator",
    "generate_mock",
    "resolve_schema",
    "FieldGenerationError",
    "InvalidSchemaError",
    "MockGenerationError",
    "PathConflictError",
    "ProviderRegistrationError",
    "SchemaDepthError",
    "unflatten",
]
