"""Tests for the provider registry and field name heuristics."""

from datetime import date, datetime, timedelta

import pytest

from docmock.generation.errors import ProviderRegistrationError
from docmock.generation.providers import (
    NAME_HEURISTICS,
    PROVIDERS,
    FakerProvider,
    get_provider,
    list_providers,
    match_field_provider,
    register_provider,
    unregister_provider,
)
from docmock.generation.providers.type_map import (
    BOUNDED_PROVIDER_VARIANTS,
    BOUNDED_PROVIDERS,
    FALLBACK_PROVIDER,
    LENGTH_PROVIDER,
    TYPE_PROVIDERS,
    bounded_number,
    date_range,
    datetime_range,
    integer_range,
    length_range,
)


@pytest.mark.parametrize(
    "field_name, expected",
    [
        ("email", "faker.email"),
        ("emailAddress", "faker.email"),
        ("firstName", "faker.first_name"),
        ("first_name", "faker.first_name"),
        ("lastName", "faker.last_name"),
        ("fullName", "faker.name"),
        ("phoneNumber", "faker.phone_number"),
        ("zipCode", "faker.postcode"),
        ("postal-code", "faker.postcode"),
        ("address.city", "faker.city"),
        ("state", "faker.state"),
        ("country", "faker.country"),
        ("street", "faker.street_address"),
        ("homeAddress", "faker.address"),
        ("productDescription", "faker.paragraph"),
        ("website", "faker.url"),
        ("requestGuid", "faker.uuid4"),
        ("hobbies.name", "faker.name"),
        ("field9311", None),
        ("isActive", None),
    ],
)
def test_name_heuristics(field_name, expected):
    """Heuristics match the last path segment in priority order."""
    assert match_field_provider(field_name, "string") == expected


def test_heuristics_only_for_text_tags():
    """Numeric, date and boolean fields never get a text provider."""
    for tag in ("number", "decimal", "date", "boolean", "buffer", "bigint", "objectid"):
        assert match_field_provider("email", tag) is None
    assert match_field_provider("email", "mixed") == "faker.email"


def test_heuristics_first_match_wins():
    """More specific patterns precede the generic ones they contain."""
    patterns = [pattern for pattern, _ in NAME_HEURISTICS]
    assert patterns.index("email") < patterns.index("address")
    assert patterns.index("firstname") < patterns.index("name")
    assert patterns.index("zipcode") < patterns.index("city")
    assert patterns.index("street") < patterns.index("address")


def test_mapped_providers_are_registered():
    """Every provider referenced by a mapping table exists in the registry."""
    referenced = {provider for _, provider in NAME_HEURISTICS}
    referenced |= set(TYPE_PROVIDERS.values())
    numeric_bounds = [(1, 2), (0.1, 0.9)]
    for tag, resolve in BOUNDED_PROVIDERS.items():
        for low, high in [(None, datetime(2020, 1, 1))] if tag == "date" else numeric_bounds:
            referenced.add(resolve(low, high)[0])
    referenced |= {resolve(None, date(2020, 1, 1))[0] for resolve in BOUNDED_PROVIDER_VARIANTS.values()}
    referenced |= {LENGTH_PROVIDER[0], FALLBACK_PROVIDER}
    assert referenced <= set(PROVIDERS)


def test_get_provider():
    """Registered names resolve to provider instances."""
    provider = get_provider("faker.email")
    assert isinstance(provider, FakerProvider)
    assert provider.field == "email"


def test_get_provider_with_config(fake):
    """Config is passed to the provider as default arguments."""
    provider = get_provider("faker.pyint", {"min_value": 7, "max_value": 7})
    assert provider.sample(fake) == 7


def test_unknown_provider():
    """Unknown names raise a KeyError subclass listing what is available."""
    with pytest.raises(ProviderRegistrationError) as exc_info:
        get_provider("faker.nope")
    assert isinstance(exc_info.value, KeyError)
    assert "faker.email" in str(exc_info.value)


def test_register_provider(fake):
    """Custom providers can be registered and removed."""
    register_provider("test.constant", lambda cfg: FakerProvider(field="pyint", min_value=3, max_value=3))
    try:
        assert "test.constant" in list_providers()
        assert get_provider("test.constant").sample(fake) == 3
    finally:
        unregister_provider("test.constant")
    assert "test.constant" not in list_providers()


def test_list_providers_sorted():
    """Provider names are listed in sorted order."""
    names = list_providers()
    assert names == sorted(names)
    assert "faker.pyint" in names


def test_faker_provider_unknown_field(fake):
    """A Faker method that does not exist is a registration defect."""
    with pytest.raises(ProviderRegistrationError):
        FakerProvider(field="not_a_faker_method").sample(fake)


def test_faker_provider_merges_kwargs(fake):
    """Call arguments override instance defaults."""
    provider = FakerProvider(field="pystr", max_chars=4)
    assert len(provider.sample(fake)) == 4
    assert len(provider.sample(fake, max_chars=8)) == 8


def test_integer_range_defaults():
    """Missing edges use the default window and never invert it."""
    assert integer_range(18, 200) == {"min_value": 18, "max_value": 200}
    assert integer_range(None, None) == {"min_value": 0, "max_value": 9999}
    assert integer_range(20_000, None) == {"min_value": 20_000, "max_value": 20_000}
    assert integer_range(None, -3) == {"min_value": -3, "max_value": -3}


def test_length_range_defaults():
    """Missing length edges use the default window and never invert it."""
    assert length_range(5, 25) == {"min_chars": 5, "max_chars": 25}
    assert length_range(None, 10) == {"min_chars": 1, "max_chars": 10}
    assert length_range(30, None) == {"min_chars": 30, "max_chars": 30}


def test_bounded_number_falls_back_to_floats():
    """Bounds with no integer inside them switch to a float draw."""
    assert bounded_number(1, 5) == ("faker.pyint", {"min_value": 1, "max_value": 5})
    assert bounded_number(0.1, 0.9) == ("faker.pyfloat", {"min_value": 0.1, "max_value": 0.9})


def test_datetime_range_single_edge():
    """A lone edge opens the window on the side that keeps it valid."""
    past = datetime(1950, 1, 1)
    assert datetime_range(None, past)["start_date"] < past
    assert datetime_range(None, past)["end_date"] == past
    future = datetime.now() + timedelta(days=3650)
    window = datetime_range(future, None)
    assert window["start_date"] >= future
    assert window["end_date"] > window["start_date"]


def test_datetime_range_whole_seconds():
    """Fractional edges are moved inward to whole seconds."""
    window = datetime_range(datetime(2020, 1, 1, 0, 0, 0, 500), datetime(2020, 1, 2, 0, 0, 0, 900))
    assert window["start_date"] == datetime(2020, 1, 1, 0, 0, 1)
    assert window["end_date"] == datetime(2020, 1, 2)


def test_date_range_single_edge():
    """Date-only windows open the same way, in whole days."""
    assert date_range(None, date(1950, 1, 1))["start_date"] < date(1950, 1, 1)
    assert date_range(date(2020, 1, 1), date(2020, 12, 31)) == {
        "start_date": date(2020, 1, 1),
        "end_date": date(2020, 12, 31),
    }
    future = date.today() + timedelta(days=400)
    assert date_range(future, None)["end_date"] > future
