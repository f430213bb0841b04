"""Provider registry for value providers."""

from typing import Callable, Dict, Any
from .base import ValueProvider
from .faker_provider import FakerProvider
from docmock.generation.constants import (
    BIGINT_DIGITS,
    BINARY_LENGTH,
    FALLBACK_TEXT_LENGTH,
    OBJECT_ID_TEMPLATE,
    RECENT_DATE_WINDOW,
)
from docmock.generation.errors import ProviderRegistrationError
from docmock.config.logging import get_logger

logger = get_logger(__name__)

# Registry of provider factories
PROVIDERS: Dict[str, Callable[[Dict[str, Any]], ValueProvider]] = {
    # Type defaults
    "faker.word": lambda cfg: FakerProvider(field="word", **cfg),
    "faker.pyint": lambda cfg: FakerProvider(field="pyint", **cfg),
    "faker.pyfloat": lambda cfg: FakerProvider(field="pyfloat", **cfg),
    "faker.bigint": lambda cfg: FakerProvider(field="random_number", **{"digits": BIGINT_DIGITS, **cfg}),
    "faker.recent_date": lambda cfg: FakerProvider(
        field="date_time_between", **{"start_date": RECENT_DATE_WINDOW, "end_date": "now", **cfg}
    ),
    "faker.date_time_between": lambda cfg: FakerProvider(field="date_time_between", **cfg),
    "faker.date_object": lambda cfg: FakerProvider(field="date_object", **cfg),
    "faker.date_between": lambda cfg: FakerProvider(field="date_between", **cfg),
    "faker.pybool": lambda cfg: FakerProvider(field="pybool", **cfg),
    "faker.binary": lambda cfg: FakerProvider(field="binary", **{"length": BINARY_LENGTH, **cfg}),
    "faker.object_id": lambda cfg: FakerProvider(field="hexify", **{"text": OBJECT_ID_TEMPLATE, **cfg}),
    "faker.pystr": lambda cfg: FakerProvider(field="pystr", **cfg),
    "faker.sample": lambda cfg: FakerProvider(field="pystr", **{"max_chars": FALLBACK_TEXT_LENGTH, **cfg}),
    # Semantic providers used by the field name heuristics
    "faker.email": lambda cfg: FakerProvider(field="email", **cfg),
    "faker.first_name": lambda cfg: FakerProvider(field="first_name", **cfg),
    "faker.last_name": lambda cfg: FakerProvider(field="last_name", **cfg),
    "faker.name": lambda cfg: FakerProvider(field="name", **cfg),
    "faker.phone_number": lambda cfg: FakerProvider(field="phone_number", **cfg),
    "faker.city": lambda cfg: FakerProvider(field="city", **cfg),
    "faker.state": lambda cfg: FakerProvider(field="state", **cfg),
    "faker.country": lambda cfg: FakerProvider(field="country", **cfg),
    "faker.street_address": lambda cfg: FakerProvider(field="street_address", **cfg),
    "faker.address": lambda cfg: FakerProvider(field="address", **cfg),
    "faker.postcode": lambda cfg: FakerProvider(field="postcode", **cfg),
    "faker.paragraph": lambda cfg: FakerProvider(field="paragraph", **cfg),
    "faker.url": lambda cfg: FakerProvider(field="url", **cfg),
    "faker.uuid4": lambda cfg: FakerProvider(field="uuid4", **cfg),
    # Available to explicit per-field overrides
    "faker.company": lambda cfg: FakerProvider(field="company", **cfg),
    "faker.job": lambda cfg: FakerProvider(field="job", **cfg),
    "faker.user_name": lambda cfg: FakerProvider(field="user_name", **cfg),
}


def get_provider(name: str, config: Dict[str, Any] | None = None) -> ValueProvider:
    """
    Get a provider instance by name.

    Args:
        name: Provider name (e.g., "faker.email", "faker.pyint")
        config: Optional configuration dict

    Returns:
        ValueProvider instance

    Raises:
        ProviderRegistrationError: If provider name is not found
    """
    if config is None:
        config = {}

    if name not in PROVIDERS:
        available = ", ".join(sorted(PROVIDERS.keys()))
        raise ProviderRegistrationError(
            f"Provider '{name}' not found. Available providers: {available}"
        )

    factory = PROVIDERS[name]
    try:
        return factory(config)
    except Exception as e:
        logger.error(f"Failed to create provider '{name}': {e}")
        raise


def register_provider(name: str, factory: Callable[[Dict[str, Any]], ValueProvider]):
    """
    Register a new provider factory.

    Args:
        name: Provider name
        factory: Factory function that takes config dict and returns ValueProvider
    """
    PROVIDERS[name] = factory
    logger.info(f"Registered provider: {name}")


def unregister_provider(name: str) -> None:
    """Remove a provider factory; unknown names are ignored."""
    PROVIDERS.pop(name, None)


def list_providers() -> list[str]:
    """
    List all registered provider names.

    Returns:
        List of provider names
    """
    return sorted(PROVIDERS.keys())
