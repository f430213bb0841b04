"""Heuristic provider assignment for fields without explicit providers."""

from typing import List, Optional, Tuple
from docmock.generation.constants import PATH_SEPARATOR
from docmock.config.logging import get_logger

logger = get_logger(__name__)

# Priority-ordered (pattern, provider) pairs. The field name is lowercased and
# stripped of "_" and "-" before a substring match; the first match wins, so
# more specific patterns come first ("emailaddress" is an email, "firstname"
# is not a full name). This is a heuristic and will misfire on unusual names;
# set "provider" on a field to override it.
NAME_HEURISTICS: List[Tuple[str, str]] = [
    ("email", "faker.email"),
    ("firstname", "faker.first_name"),
    ("lastname", "faker.last_name"),
    ("surname", "faker.last_name"),
    ("fullname", "faker.name"),
    ("phone", "faker.phone_number"),
    ("mobile", "faker.phone_number"),
    ("zipcode", "faker.postcode"),
    ("postcode", "faker.postcode"),
    ("postalcode", "faker.postcode"),
    ("city", "faker.city"),
    ("state", "faker.state"),
    ("country", "faker.country"),
    ("street", "faker.street_address"),
    ("address", "faker.address"),
    ("description", "faker.paragraph"),
    ("url", "faker.url"),
    ("website", "faker.url"),
    ("uuid", "faker.uuid4"),
    ("guid", "faker.uuid4"),
    ("name", "faker.name"),
]

# Heuristic providers return text, so they only replace text-compatible tags
HEURISTIC_TAGS = frozenset({"string", "mixed"})


def normalize_field_name(path: str) -> str:
    """Last path segment, lowercased, without word separators."""
    name = path.rsplit(PATH_SEPARATOR, 1)[-1]
    return name.lower().replace("_", "").replace("-", "")


def match_field_provider(path: str, type_tag: str) -> Optional[str]:
    """
    Find a semantic provider for a field by its name.

    Args:
        path: Field name or dotted path (only the last segment is matched)
        type_tag: Field type tag

    Returns:
        Provider name, or None if no heuristic applies
    """
    if type_tag not in HEURISTIC_TAGS:
        return None

    name = normalize_field_name(path)
    for pattern, provider in NAME_HEURISTICS:
        if pattern in name:
            logger.debug(f"Assigned {provider} to {path} (matched '{pattern}')")
            return provider
    return None
