"""Strict ISO-8601 timestamp validation for query filters."""

import re
from datetime import datetime, timezone

# UTC only, seconds precision with optional milliseconds, trailing "Z" required.
_ISO8601_UTC = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:\.\d{3})?Z")


def parse_iso_datetime(value: str) -> datetime | None:
    """Parse ``YYYY-MM-DDTHH:MM:SS[.mmm]Z`` into an aware UTC datetime.

    Returns None when the string does not match the format or names a date
    that does not exist (e.g. February 30th).
    """
    if not isinstance(value, str) or not _ISO8601_UTC.fullmatch(value):
        return None
    fmt = "%Y-%m-%dT%H:%M:%S.%fZ" if "." in value else "%Y-%m-%dT%H:%M:%SZ"
    try:
        parsed = datetime.strptime(value, fmt)
    except ValueError:
        return None
    return parsed.replace(tzinfo=timezone.utc)


def is_valid_date(value: str) -> bool:
    """Return True if ``value`` is a strict ISO-8601 UTC timestamp."""
    return parse_iso_datetime(value) is not None


__all__ = ["is_valid_date", "parse_iso_datetime"]
