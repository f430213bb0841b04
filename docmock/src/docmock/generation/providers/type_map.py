"""Type tag and constraint to provider mapping tables."""

import math
from datetime import date, datetime, time, timedelta
from typing import Any, Callable, Dict, Optional, Tuple

from docmock.generation.constants import DEFAULT_DATE_SPAN, DEFAULT_INT_RANGE, DEFAULT_TEXT_LENGTH

# Default provider per primitive type tag. "mixed" is deliberately absent: it
# resolves through the fallback policy.
TYPE_PROVIDERS: Dict[str, str] = {
    "string": "faker.word",
    "number": "faker.pyint",
    "decimal": "faker.pyint",
    "date": "faker.recent_date",
    "boolean": "faker.pybool",
    "buffer": "faker.binary",
    "bigint": "faker.bigint",
    "objectid": "faker.object_id",
}

# Tags resolved by the fallback policy instead of a registered provider
FALLBACK_TAGS = frozenset({"mixed"})


def integer_range(low: Optional[Any], high: Optional[Any]) -> Dict[str, Any]:
    """
    Keyword arguments for ``pyint`` covering [low, high].

    A missing edge takes the default range edge, widened so the window is
    never empty. Fractional bounds are tightened to the integers inside them,
    which leaves the window empty (min_value > max_value) when no integer fits.
    """
    lo = math.ceil(low) if low is not None else None
    hi = math.floor(high) if high is not None else None
    if lo is None:
        lo = min(DEFAULT_INT_RANGE[0], hi)
    if hi is None:
        hi = max(DEFAULT_INT_RANGE[1], lo)
    return {"min_value": int(lo), "max_value": int(hi)}


def float_range(low: Any, high: Any) -> Dict[str, Any]:
    """Keyword arguments for ``pyfloat`` covering [low, high]."""
    return {"min_value": float(low), "max_value": float(high)}


def _as_datetime(value: Optional[Any]) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    return datetime.combine(value, time())


def datetime_range(low: Optional[Any], high: Optional[Any]) -> Dict[str, Any]:
    """
    Keyword arguments for ``date_time_between`` covering [low, high].

    Faker draws whole seconds, so a fractional lower edge is rounded up and
    the upper edge down. A missing edge is DEFAULT_DATE_SPAN away from the
    declared one: before ``high``, or after ``low`` when ``low`` is in the
    future (otherwise now).
    """
    low, high = _as_datetime(low), _as_datetime(high)
    if low is None and high is None:
        return {}
    if low is not None and low.microsecond:
        low = low.replace(microsecond=0) + timedelta(seconds=1)
    if high is not None:
        high = high.replace(microsecond=0)

    if low is None:
        low = high - DEFAULT_DATE_SPAN
    if high is None:
        now = datetime.now(low.tzinfo).replace(microsecond=0)
        high = now if low <= now else low + DEFAULT_DATE_SPAN

    kwargs: Dict[str, Any] = {"start_date": low, "end_date": high}
    if low.tzinfo is not None:
        kwargs["tzinfo"] = low.tzinfo
    return kwargs


def date_range(low: Optional[Any], high: Optional[Any]) -> Dict[str, Any]:
    """Keyword arguments for ``date_between``; same windowing as datetime_range, in whole days."""
    if isinstance(low, datetime):
        low = low.date() + timedelta(days=1) if low.time() != time() else low.date()
    if isinstance(high, datetime):
        high = high.date()
    if low is None and high is None:
        return {}
    if low is None:
        low = high - DEFAULT_DATE_SPAN
    if high is None:
        today = date.today()
        high = today if low <= today else low + DEFAULT_DATE_SPAN
    return {"start_date": low, "end_date": high}


def length_range(min_length: Optional[int], max_length: Optional[int]) -> Dict[str, Any]:
    """Keyword arguments for ``pystr`` producing a length in [min_length, max_length]."""
    lo = min_length if min_length is not None else min(DEFAULT_TEXT_LENGTH[0], max_length)
    hi = max_length if max_length is not None else max(DEFAULT_TEXT_LENGTH[1], lo)
    return {"min_chars": int(lo), "max_chars": int(hi)}


RangeBuilder = Callable[[Optional[Any], Optional[Any]], Dict[str, Any]]
# (low, high) -> (provider name, provider kwargs)
BoundedResolver = Callable[[Optional[Any], Optional[Any]], Tuple[str, Dict[str, Any]]]


def bounded_integer(low: Optional[Any], high: Optional[Any]) -> Tuple[str, Dict[str, Any]]:
    return "faker.pyint", integer_range(low, high)


def bounded_number(low: Optional[Any], high: Optional[Any]) -> Tuple[str, Dict[str, Any]]:
    """Integers when one fits in [low, high], floats otherwise (e.g. 0.1..0.9)."""
    kwargs = integer_range(low, high)
    if kwargs["min_value"] <= kwargs["max_value"]:
        return "faker.pyint", kwargs
    return "faker.pyfloat", float_range(low, high)


def bounded_datetime(low: Optional[Any], high: Optional[Any]) -> Tuple[str, Dict[str, Any]]:
    return "faker.date_time_between", datetime_range(low, high)


def bounded_date(low: Optional[Any], high: Optional[Any]) -> Tuple[str, Dict[str, Any]]:
    return "faker.date_between", date_range(low, high)


# Bounded provider per type tag
BOUNDED_PROVIDERS: Dict[str, BoundedResolver] = {
    "number": bounded_number,
    "decimal": bounded_number,
    "bigint": bounded_integer,
    "date": bounded_datetime,
}

# Bounded counterparts of explicit field providers, used instead of the
# type tag's entry when the field names one of these providers
BOUNDED_PROVIDER_VARIANTS: Dict[str, BoundedResolver] = {
    "faker.date_object": bounded_date,
}

# Length-bounded text; corpus-free so any length window can be met
LENGTH_PROVIDER: Tuple[str, RangeBuilder] = ("faker.pystr", length_range)

# Fallback text sample for the "sample" policy
FALLBACK_PROVIDER = "faker.sample"
