"""Exceptions raised by the mock generation engine."""


class MockGenerationError(Exception):
    """Base class for mock generation failures."""


class InvalidSchemaError(MockGenerationError, TypeError):
    """The argument passed to the engine is not a recognized schema."""


class PathConflictError(MockGenerationError, ValueError):
    """A dotted path is implied to be both a leaf value and a container."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"Cannot rebuild '{path}': {message}")


class SchemaDepthError(MockGenerationError, RecursionError):
    """Schema nesting exceeded the configured maximum depth."""


class ProviderRegistrationError(MockGenerationError, KeyError):
    """A provider name or a bounded provider for a type tag is not registered."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable
        return str(self.args[0]) if self.args else ""


class FieldGenerationError(MockGenerationError):
    """Generating the value of a single field failed."""

    def __init__(self, path: str, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to generate '{path}': [{type(cause).__name__}] {cause}")
