"""Value dispatch for primitive fields."""

from typing import Any, Literal, Optional
from faker import Faker

from docmock.generation.constraints import ConstraintSet
from docmock.generation.errors import ProviderRegistrationError
from docmock.generation.providers.assign import match_field_provider
from docmock.generation.providers.registry import get_provider
from docmock.generation.providers.type_map import (
    BOUNDED_PROVIDER_VARIANTS,
    BOUNDED_PROVIDERS,
    FALLBACK_PROVIDER,
    FALLBACK_TAGS,
    LENGTH_PROVIDER,
    TYPE_PROVIDERS,
)
from docmock.schema.types import STRUCTURAL_TAGS
from docmock.config.logging import get_logger

logger = get_logger(__name__)

FallbackPolicy = Literal["sample", "null"]


class ValueDispatcher:
    """
    Choose and run the provider for one primitive field.

    Decision order, first match wins:

    1. enum candidates: uniform pick (min/max/length are ignored)
    2. min/max: the bounded variant of the explicit provider, else the
       bounded provider registered for the type tag
    3. min_length/max_length: corpus-free length-bounded text
    4. explicit provider on the field, else the field name heuristic
    5. the default provider for the type tag
    6. the fallback policy ("sample" text or "null")
    """

    def __init__(self, fake: Faker, fallback: FallbackPolicy = "sample"):
        self.fake = fake
        self.fallback = fallback

    def dispatch(
        self,
        path: str,
        type_tag: str,
        constraints: ConstraintSet,
        provider: Optional[str] = None,
    ) -> Any:
        """
        Produce one value for a primitive field.

        Args:
            path: Field name or dotted path (heuristics use the last segment)
            type_tag: Field type tag
            constraints: Constraints extracted from the field descriptor
            provider: Explicit provider name overriding the heuristics

        Returns:
            Generated value (None only under the "null" fallback policy)

        Raises:
            ProviderRegistrationError: Bounds on a tag without a bounded
                provider, or an unknown provider name
        """
        if type_tag in STRUCTURAL_TAGS:
            raise ValueError(f"{path}: structural type '{type_tag}' cannot be dispatched as a value")

        if constraints.has_enum:
            return self.fake.random_element(elements=constraints.enum)

        if constraints.has_bounds:
            resolve = BOUNDED_PROVIDER_VARIANTS.get(provider) or BOUNDED_PROVIDERS.get(type_tag)
            if resolve is None:
                raise ProviderRegistrationError(
                    f"No bounded provider registered for type '{type_tag}' (field '{path}')"
                )
            name, kwargs = resolve(constraints.min, constraints.max)
            return self.sample(name, **kwargs)

        if constraints.has_length:
            # Word sampling cannot guarantee an arbitrary length window
            name, build_kwargs = LENGTH_PROVIDER
            return self.sample(name, **build_kwargs(constraints.min_length, constraints.max_length))

        name = provider or match_field_provider(path, type_tag) or TYPE_PROVIDERS.get(type_tag)
        if name:
            return self.sample(name)

        if type_tag in FALLBACK_TAGS:
            logger.debug(f"No provider for {path} (type '{type_tag}'), fallback policy '{self.fallback}'")
        else:
            logger.warning(f"Unknown type '{type_tag}' for {path}, fallback policy '{self.fallback}'")
        if self.fallback == "null":
            return None
        return self.sample(FALLBACK_PROVIDER)

    def sample(self, name: str, **kwargs) -> Any:
        """Sample one value from a registered provider."""
        return get_provider(name).sample(self.fake, **kwargs)
