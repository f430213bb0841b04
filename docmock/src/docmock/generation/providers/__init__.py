"""Value providers for generating realistic field values."""

from .base import ValueProvider
from .faker_provider import FakerProvider
from .registry import PROVIDERS, get_provider, register_provider, unregister_provider, list_providers
from .assign import NAME_HEURISTICS, match_field_provider

__all__ = [
    "ValueProvider",
    "FakerProvider",
    "PROVIDERS",
    "get_provider",
    "register_provider",
    "unregister_provider",
    "list_providers",
    "NAME_HEURISTICS",
    "match_field_provider",
]
