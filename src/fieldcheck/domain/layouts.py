"""Date layouts understood by :class:`~fieldcheck.domain.rules.DateRule`.

A layout is either a named layout (currently only :data:`RFC3339`) or a
``datetime.strptime`` format string. Named layouts exist where strptime
cannot express the format strictly enough.

:data:`RFC3339` follows Go's ``time.RFC3339`` parsing: the ``T`` and
``Z`` separators are uppercase only, digits are ASCII only, and a
fraction of any length is accepted and truncated to microseconds.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

RFC3339 = "rfc3339"

DATE_ONLY = "%Y-%m-%d"
DATETIME = "%Y-%m-%d %H:%M:%S"
TIME_ONLY = "%H:%M:%S"
RFC1123Z = "%a, %d %b %Y %H:%M:%S %z"

# Seconds are mandatory, offset is Z or +hh:mm. Used with fullmatch.
_RFC3339_PATTERN = re.compile(
    r"([0-9]{4})-([0-9]{2})-([0-9]{2})T"
    r"([0-9]{2}):([0-9]{2}):([0-9]{2})(?:\.([0-9]+))?"
    r"(Z|[+-][0-9]{2}:[0-9]{2})"
)


def _parse_offset(text: str) -> timezone:
    if text == "Z":
        return timezone.utc
    sign = -1 if text[0] == "-" else 1
    hours, minutes = int(text[1:3]), int(text[4:6])
    if minutes > 59:
        msg = f"offset minutes out of range: {text}"
        raise ValueError(msg)
    return timezone(sign * timedelta(hours=hours, minutes=minutes))


def parse_rfc3339(value: str) -> datetime:
    """Parse a strict RFC 3339 timestamp.

    Raises:
        ValueError: If *value* does not match the layout or a component
            is out of range.
    """
    match = _RFC3339_PATTERN.fullmatch(value)
    if match is None:
        msg = f"{value!r} does not match layout RFC 3339 (YYYY-MM-DDThh:mm:ss[.frac]Z|±hh:mm)"
        raise ValueError(msg)
    year, month, day, hour, minute, second, fraction, offset = match.groups()
    # datetime only carries microseconds; extra fraction digits are dropped.
    micros = int((fraction or "").ljust(6, "0")[:6])
    return datetime(
        int(year),
        int(month),
        int(day),
        int(hour),
        int(minute),
        int(second),
        micros,
        tzinfo=_parse_offset(offset),
    )


NAMED_LAYOUTS: dict[str, Callable[[str], datetime]] = {
    RFC3339: parse_rfc3339,
}


def parse_date(value: str, layout: str) -> datetime:
    """Parse *value* under *layout*, a named layout or strptime format.

    Raises:
        ValueError: If *value* cannot be parsed.
    """
    parser = NAMED_LAYOUTS.get(layout)
    if parser is not None:
        return parser(value)
    return datetime.strptime(value, layout)
