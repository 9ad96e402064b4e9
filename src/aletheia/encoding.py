"""Encoding helpers that turn controlled values into wire tokens."""

from collections.abc import Iterable
from datetime import datetime, timedelta, timezone

from aletheia.enums import Block, Field, Tag

ALL_TOKEN = "all"

_MAX_OFFSET_HOURS = 23


def generate_sequence(items: Iterable[Field | Tag]) -> str:
    """Join fields or tags into a comma-separated wire token.

    If the wildcard member is present anywhere in ``items`` the result is
    ``"all"``. Otherwise members are joined in input order, duplicates kept.

    Args:
        items: Field or Tag members.

    Returns:
        The wire token, or an empty string for an empty selection.
    """
    items = list(items)
    if any(item.is_all for item in items):
        return ALL_TOKEN
    return ",".join(item.value for item in items)


def generate_blocks(items: Iterable[Block]) -> str:
    """Join block selectors into a comma-separated wire token.

    Args:
        items: Block selectors.

    Returns:
        ``"all"`` if ``Block.ALL`` is present, else the joined selector tokens.
    """
    items = list(items)
    if any(item.is_all for item in items):
        return ALL_TOKEN
    return ",".join(item.to_wire() for item in items)


def format_datetime(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    offset_hours: int,
) -> str:
    """Format a local date and time with a fixed hour offset as RFC 3339.

    An offset outside the representable range falls back to UTC. A date or
    time that does not exist yields an empty string.

    Args:
        year: Calendar year.
        month: Month of the year, 1-12.
        day: Day of the month.
        hour: Hour of the day, 0-23.
        minute: Minute, 0-59.
        second: Second, 0-59.
        offset_hours: Signed offset from UTC in hours.

    Returns:
        e.g. ``"2021-12-31T00:00:00+05:00"``, or ``""`` for invalid input.
    """
    if abs(offset_hours) > _MAX_OFFSET_HOURS:
        offset_hours = 0
    tz = timezone(timedelta(hours=offset_hours))
    try:
        value = datetime(year, month, day, hour, minute, second, tzinfo=tz)
    except (ValueError, OverflowError):
        return ""
    return value.isoformat()
