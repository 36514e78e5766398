"""Date Codec - canonical yyyy-MM-dd wire dates and a tolerant decoder.

Invariants:
    - encode() always yields 10 ASCII chars: zero-padded year, month, day
    - decode() never raises; unparsable input returns None
    - decode(encode(d)) == d for every date
    - Only numeric strptime directives are used, so parsing ignores the host locale

Decode order:
    1. date-time with UTC offset (2001-05-03T10:00:00-06:00, ...Z, fractional seconds)
    2. yyyy-MM-dd
    3. dd/MM/yyyy
"""

import logging
from datetime import date, datetime

logger = logging.getLogger(__name__)

_DATETIME_FORMATS = (
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%S.%f%z",
)
_DATE_FORMATS = (
    "%Y-%m-%d",
    "%d/%m/%Y",
)


def encode(value: date) -> str:
    """Format as yyyy-MM-dd. strftime is avoided: %Y is not zero-padded everywhere."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def decode(text: object) -> date | None:
    """Parse a wire date in any of the known formats, or None."""
    if not isinstance(text, str):
        return None
    text = text.strip()
    if not text:
        return None

    for fmt in _DATETIME_FORMATS:
        parsed = _try_strptime(text, fmt)
        # Calendar date as written; the offset is not applied
        if parsed is not None and parsed.tzinfo is not None:
            return parsed.date()

    for fmt in _DATE_FORMATS:
        parsed = _try_strptime(text, fmt)
        if parsed is not None:
            return parsed.date()

    logger.debug("Unparsable date %r", text)
    return None


def decode_or_today(text: object, today: date | None = None) -> date:
    """Fallback policy for callers: unparsable dates become the current date."""
    return decode(text) or today or date.today()


def _try_strptime(text: str, fmt: str) -> datetime | None:
    if not text.isascii():
        return None
    try:
        return datetime.strptime(text, fmt)
    except ValueError:
        return None
