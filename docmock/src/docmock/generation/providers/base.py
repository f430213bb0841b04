"""Base protocol for value providers."""

from typing import Any, Protocol
from faker import Faker


class ValueProvider(Protocol):
    """
    Protocol for value providers that generate realistic values.

    Providers are stateless; the random source is the Faker instance passed
    to ``sample`` so that seeding it makes generation reproducible.
    """

    def sample(self, fake: Faker, **kwargs) -> Any:
        """
        Sample one value.

        Args:
            fake: Seeded Faker instance owned by the caller
            **kwargs: Additional provider-specific arguments

        Returns:
            Generated value
        """
        ...
