"""docmock: mock documents from declarative schemas."""

from docmock.generation import (
    GenerationOptions,
    InvalidSchemaError,
    MockGenerationError,
    MockGenerator,
    PathConflictError,
    ProviderRegistrationError,
    SchemaDepthError,
    generate_mock,
)
from docmock.schema.definition import SchemaDefinitionError
from docmock.schema.introspect import schema_from_model
from docmock.schema.models import FieldDescriptor, Schema
from docmock.schema.validation import DocumentIssue, validate_document

__all__ = [
    "GenerationOptions",
    "MockGenerator",
    "generate_mock",
    "Schema",
    "FieldDescriptor",
    "schema_from_model",
    "validate_document",
    "DocumentIssue",
    "SchemaDefinitionError",
    "MockGenerationError",
    "InvalidSchemaError",
    "PathConflictError",
    "ProviderRegistrationError",
    "SchemaDepthError",
]
