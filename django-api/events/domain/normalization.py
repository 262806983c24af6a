"""Pure normalization rules for event fields.

Every function here is side-effect free and raises ``ValueError`` on input it
cannot normalize. Mapping to domain errors happens in the service layer.
"""

import re
from collections.abc import Iterable
from datetime import timezone

from dateutil import parser as dateutil_parser

_SLUG_STRIP = re.compile(r"[^\w-]", re.ASCII)
_WHITESPACE = re.compile(r"\s+")
_HYPHENS = re.compile(r"-+")

_TWELVE_HOUR = re.compile(r"^(\d{1,2}):(\d{2})\s*(AM|PM)$", re.ASCII)
_TWENTY_FOUR_HOUR = re.compile(r"^(\d{1,2}):(\d{2})$", re.ASCII)


def slugify(title: str) -> str:
    """Derive a URL-safe slug from an event title.

    >>> slugify("React Conf 2026!")
    'react-conf-2026'
    """
    slug = title.lower().strip()
    slug = _WHITESPACE.sub("-", slug)
    slug = _SLUG_STRIP.sub("", slug)
    return _HYPHENS.sub("-", slug)


def disambiguate_slug(base: str, taken: Iterable[str]) -> str:
    """Return ``base`` if free, else ``base-<n>`` past the highest suffix in use."""
    taken = set(taken)
    if base not in taken:
        return base

    prefix = f"{base}-"
    highest = 1
    for slug in taken:
        suffix = slug[len(prefix):] if slug.startswith(prefix) else ""
        if suffix.isdigit():
            highest = max(highest, int(suffix))
    return f"{prefix}{highest + 1}"


def normalize_date(value: str) -> str:
    """Parse a free-form date and return it as ``YYYY-MM-DD`` in UTC."""
    try:
        parsed = dateutil_parser.parse(value)
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError) as exc:
        raise ValueError(f"Invalid date format: {value}") from exc
    return parsed.date().isoformat()


def normalize_time(value: str) -> str:
    """Convert a 12-hour or 24-hour time of day to 24-hour ``HH:MM``."""
    trimmed = value.strip().upper()

    match = _TWELVE_HOUR.match(trimmed)
    if match:
        hours, minutes, period = int(match.group(1)), match.group(2), match.group(3)
        if not 1 <= hours <= 12 or int(minutes) > 59:
            raise ValueError(f"Invalid time format: {value}")
        if period == "PM" and hours != 12:
            hours += 12
        if period == "AM" and hours == 12:
            hours = 0
        return f"{hours:02d}:{minutes}"

    match = _TWENTY_FOUR_HOUR.match(trimmed)
    if match:
        hours, minutes = int(match.group(1)), match.group(2)
        if hours > 23 or int(minutes) > 59:
            raise ValueError(f"Invalid time format: {value}")
        return f"{hours:02d}:{minutes}"

    raise ValueError(f"Invalid time format: {value}")
