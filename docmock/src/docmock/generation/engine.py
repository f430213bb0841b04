"""Schema-walking mock document generator."""

import inspect
from typing import Any, Dict, List, Mapping, Optional, Union

from faker import Faker
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from docmock.config.settings import get_settings
from docmock.generation.constants import DEFAULT_MAX_DEPTH
from docmock.generation.constraints import extract_constraints
from docmock.generation.dispatch import FallbackPolicy, ValueDispatcher
from docmock.generation.error_logging import log_error
from docmock.generation.errors import (
    FieldGenerationError,
    InvalidSchemaError,
    MockGenerationError,
    SchemaDepthError,
)
from docmock.generation.unflatten import unflatten
from docmock.schema.introspect import schema_from_model
from docmock.schema.models import FieldDescriptor, Schema
from docmock.config.logging import get_logger

logger = get_logger(__name__)

SchemaLike = Union[Schema, type]


class GenerationOptions(BaseModel):
    """Options for one generation call. Accepts camelCase keys (``requiredOnly``); unknown keys fail."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    required_only: bool = False
    seed: Optional[int] = None
    locale: str = "en_US"
    fallback: FallbackPolicy = "sample"
    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=1)

    @classmethod
    def from_settings(cls, **overrides: Any) -> "GenerationOptions":
        """Options seeded from Settings, with explicit overrides applied on top."""
        settings = get_settings()
        values: Dict[str, Any] = {
            "required_only": settings.required_only,
            "seed": settings.seed,
            "locale": settings.locale,
            "fallback": settings.fallback,
            "max_depth": settings.max_depth,
        }
        values.update(overrides)
        return cls(**values)


def resolve_options(
    options: Union[GenerationOptions, Mapping[str, Any], None] = None, **overrides: Any
) -> GenerationOptions:
    """
    Normalize options given as a GenerationOptions, a mapping, or nothing.

    Unset values come from Settings; keyword overrides win over both.
    """
    if isinstance(options, GenerationOptions):
        explicit = options.model_dump(exclude_unset=True)
    else:
        explicit = GenerationOptions.model_validate(options or {}).model_dump(exclude_unset=True)
    explicit.update(overrides)
    return GenerationOptions.from_settings(**explicit)


def resolve_schema(schema: Any) -> Schema:
    """
    Accept a Schema or a pydantic model class; reject anything else.

    Raises:
        InvalidSchemaError: If the argument is not a recognized schema
    """
    if isinstance(schema, Schema):
        return schema
    if inspect.isclass(schema) and issubclass(schema, BaseModel) and schema is not Schema:
        return schema_from_model(schema)
    raise InvalidSchemaError("Valid schema is required to generate mock")


class MockGenerator:
    """
    Generate mock documents from a schema.

    Each generator owns its Faker instance; with a seed, output is
    reproducible and no global random state is touched.
    """

    def __init__(
        self,
        options: Union[GenerationOptions, Mapping[str, Any], None] = None,
        fake: Optional[Faker] = None,
    ):
        self.options = resolve_options(options)
        self.fake = fake or Faker(self.options.locale)
        if self.options.seed is not None:
            self.fake.seed_instance(self.options.seed)
        self.dispatcher = ValueDispatcher(self.fake, fallback=self.options.fallback)

    def generate(self, schema: SchemaLike) -> Dict[str, Any]:
        """
        Generate one mock document.

        Args:
            schema: Schema, or pydantic model class to introspect

        Returns:
            Nested document in schema field order

        Raises:
            InvalidSchemaError: If schema is not a recognized schema
            SchemaDepthError: If nesting exceeds options.max_depth
            PathConflictError: If dotted paths cannot be rebuilt
            FieldGenerationError: If a field's provider failed
        """
        resolved = resolve_schema(schema)
        document = self._generate(resolved, depth=0)
        logger.info(
            f"Generated mock document with {len(document)} top-level fields "
            f"(required_only={self.options.required_only})"
        )
        return document

    def generate_many(self, schema: SchemaLike, count: int) -> List[Dict[str, Any]]:
        """Generate ``count`` documents from the same schema."""
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        resolved = resolve_schema(schema)
        documents = [self._generate(resolved, depth=0) for _ in range(count)]
        logger.info(f"Generated {len(documents)} mock documents")
        return documents

    def _generate(self, schema: Schema, depth: int) -> Dict[str, Any]:
        if depth > self.options.max_depth:
            raise SchemaDepthError(
                f"Schema nesting exceeds max depth {self.options.max_depth}; "
                f"is the schema self-referential?"
            )

        flat: Dict[str, Any] = {}
        for path, descriptor in schema.paths.items():
            # Skipped before generation so no provider is called for the field
            if self.options.required_only and not descriptor.required:
                continue
            try:
                flat[path] = self._field_value(path, descriptor, depth)
            except MockGenerationError:
                raise
            except Exception as e:
                log_error(e, operation="generate field", field_path=path, type_tag=descriptor.type, depth=depth)
                raise FieldGenerationError(path, e) from e
        return unflatten(flat)

    def _field_value(self, path: str, descriptor: FieldDescriptor, depth: int) -> Any:
        if descriptor.type == "embedded":
            return self._generate(descriptor.sub_schema, depth + 1)
        if descriptor.type == "array":
            # Exactly one sample per array
            if descriptor.sub_schema is not None:
                return [self._generate(descriptor.sub_schema, depth + 1)]
            return [self._field_value(path, descriptor.element, depth + 1)]

        constraints = extract_constraints(descriptor)
        return self.dispatcher.dispatch(path, descriptor.type, constraints, provider=descriptor.provider)


def generate_mock(
    schema: SchemaLike,
    options: Union[GenerationOptions, Mapping[str, Any], None] = None,
    **overrides: Any,
) -> Dict[str, Any]:
    """
    Generate one mock document conforming to a schema.

    Args:
        schema: Schema, or pydantic model class to introspect
        options: GenerationOptions or mapping such as ``{"requiredOnly": True}``
        **overrides: Option overrides, e.g. ``seed=7``

    Returns:
        Nested mock document
    """
    return MockGenerator(resolve_options(options, **overrides)).generate(schema)
