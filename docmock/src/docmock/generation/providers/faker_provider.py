"""Faker-based value provider."""

from typing import Any
from faker import Faker

from docmock.generation.errors import ProviderRegistrationError


class FakerProvider:
    """Value provider calling one Faker method."""

    def __init__(self, field: str = "word", **kwargs):
        """
        Initialize Faker provider.

        Args:
            field: Faker method name (e.g., "email", "pyint", "date_time_between")
            **kwargs: Default arguments passed to the Faker method
        """
        self.field = field
        self.kwargs = kwargs

    def sample(self, fake: Faker, **kwargs) -> Any:
        """
        Sample one value using Faker.

        Args:
            fake: Faker instance supplying the random source
            **kwargs: Additional arguments (merged over instance kwargs)

        Returns:
            Generated value
        """
        try:
            method = getattr(fake, self.field)
        except AttributeError as e:
            raise ProviderRegistrationError(
                f"Faker field '{self.field}' not available. "
                f"Available fields include: email, pyint, pystr, etc."
            ) from e
        return method(**{**self.kwargs, **kwargs})

    def __repr__(self) -> str:
        return f"FakerProvider(field={self.field!r}, kwargs={self.kwargs!r})"
