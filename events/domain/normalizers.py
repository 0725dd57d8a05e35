"""Pure field normalizers for event and booking input.

Each function maps a raw user-supplied value to its canonical stored form
or raises a domain error. None of them touch the store.
"""

import re
from datetime import datetime, timezone

from dateutil import parser as date_parser

from events.domain.errors import (
    InvalidDateFormatError,
    InvalidTimeFormatError,
    InvalidTimeValuesError,
    ValidationError,
)

_SLUG_DISALLOWED = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE_RUN = re.compile(r"\s+")
_HYPHEN_RUN = re.compile(r"-+")

SLUG_PATTERN = re.compile(r"[a-z0-9]+(?:-[a-z0-9]+)*")
SLUG_MAX_LENGTH = 255

_TIME_PATTERN = re.compile(r"(\d{1,2}):(\d{2})(?:\s*(AM|PM|am|pm))?", re.ASCII)

_EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def slugify(title: str) -> str:
    """Turn a title into a URL-safe slug.

    Characters outside ``[a-z0-9]``, whitespace and ``-`` are dropped rather
    than transliterated, so ``"Café"`` becomes ``"caf"``. The result may be
    empty.
    """
    slug = title.lower().strip()
    slug = _SLUG_DISALLOWED.sub("", slug)
    slug = _WHITESPACE_RUN.sub("-", slug)
    return _HYPHEN_RUN.sub("-", slug)


def is_valid_slug(value: str) -> bool:
    return SLUG_PATTERN.fullmatch(value) is not None


def fit_slug(base: str, suffix: str = "") -> str:
    """Cut ``base`` so that ``base + suffix`` fits in ``SLUG_MAX_LENGTH``.

    Hyphens left dangling by the cut are dropped.
    """
    room = SLUG_MAX_LENGTH - len(suffix)
    if len(base) > room:
        base = base[:room].rstrip("-")
    return base + suffix


def normalize_date(raw: str) -> str:
    """Parse a free-form date and return it as an ISO-8601 UTC instant.

    Accepts bare ``YYYY-MM-DD``, full ISO timestamps and natural language
    such as ``"June 15, 2024"``. Values without an offset are read as UTC.
    The result always looks like ``2024-06-15T00:00:00.000Z``.

    Raises:
        InvalidDateFormatError: If ``raw`` is not a recognizable date.
    """
    default = datetime(datetime.now(timezone.utc).year, 1, 1)
    try:
        parsed = date_parser.parse(raw, default=default)
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        else:
            # Shifting to UTC can leave the datetime range near year 1 or 9999.
            parsed = parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError) as exc:
        raise InvalidDateFormatError(raw) from exc

    # isoformat pads the year to four digits; strftime("%Y") does not on glibc.
    return parsed.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def normalize_time(raw: str) -> str:
    """Normalize ``H:MM``, ``HH:MM`` or ``HH:MM AM/PM`` to 24-hour ``HH:MM``.

    Raises:
        InvalidTimeFormatError: If the value does not have the expected shape.
        InvalidTimeValuesError: If hours or minutes are out of range.
    """
    match = _TIME_PATTERN.fullmatch(raw.strip())
    if match is None:
        raise InvalidTimeFormatError(raw)

    hours = int(match.group(1))
    minutes = int(match.group(2))
    meridiem = match.group(3)
    if meridiem:
        is_pm = meridiem.lower() == "pm"
        if is_pm and hours < 12:
            hours += 12
        if not is_pm and hours == 12:
            hours = 0

    if not (0 <= hours <= 23 and 0 <= minutes <= 59):
        raise InvalidTimeValuesError(raw)

    return f"{hours:02d}:{minutes:02d}"


def is_valid_email(value: str) -> bool:
    """Check that ``value`` looks like ``local@domain.tld``.

    Whitespace and a second ``@`` are rejected anywhere, and so are
    consecutive dots.
    """
    if ".." in value:
        return False
    return _EMAIL_PATTERN.fullmatch(value) is not None


def require_text(value: object, field: str) -> str:
    """Trim a required string field.

    Raises:
        ValidationError: If the value is not a string or is blank.
    """
    if not isinstance(value, str):
        raise ValidationError(field, f"{field} must be a string")
    trimmed = value.strip()
    if not trimmed:
        raise ValidationError(field, f"{field} is required")
    return trimmed


def require_string_list(value: object, field: str) -> tuple[str, ...]:
    """Check an ordered list of strings, preserving order. Empty is allowed."""
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise ValidationError(field, f"{field} must be a list of strings")
    if not all(isinstance(item, str) for item in value):
        raise ValidationError(field, f"{field} must be a list of strings")
    return tuple(value)
