"""ISO 8601 timestamps that survive a parse/serialize round trip.

``Timestamp`` keeps both the parsed ``datetime`` and the literal it was read
from, and serializes back to that literal.  Timestamps built from a
``datetime`` get a canonical UTC literal.
"""

from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta, timezone

from lxml import etree
from pydantic import BaseModel, ConfigDict

from gdatakit.errors import not_iso8601_format

_DATETIME_RE = re.compile(
    r"""
    ^(?P<year>\d{4})(?P<dsep>-?)(?P<month>\d{2})(?P=dsep)(?P<day>\d{2})
    T(?P<hour>\d{2})(?P<tsep>:?)(?P<minute>\d{2})(?P=tsep)(?P<second>\d{2})
    (?:[.,](?P<fraction>\d+))?
    (?P<tz>Z|[+-]\d{2}(?::?\d{2})?)?$
    """,
    re.VERBOSE,
)

_DATE_RE = re.compile(r"^(?P<year>\d{4})(?P<dsep>-?)(?P<month>\d{2})(?P=dsep)(?P<day>\d{2})$")


def _parse_offset(tz: str | None) -> timezone:
    if tz is None or tz == "Z":
        return timezone.utc
    sign = -1 if tz[0] == "-" else 1
    digits = tz[1:].replace(":", "")
    hours = int(digits[:2])
    minutes = int(digits[2:4]) if len(digits) > 2 else 0
    if hours > 23 or minutes > 59:
        raise ValueError(f"Invalid UTC offset: {tz}")
    return timezone(sign * timedelta(hours=hours, minutes=minutes))


class Timestamp(BaseModel):
    """A timezone-aware instant (or calendar date) plus its literal form."""

    model_config = ConfigDict(frozen=True)

    value: datetime
    literal: str
    is_date: bool = False

    @classmethod
    def parse(cls, text: str) -> Timestamp:
        """Parse an ISO 8601 date-time; raises ``ValueError`` if malformed.

        Both extended (``2009-04-17T15:00:00.000Z``) and basic
        (``20090417T150000Z``) forms are accepted.  A missing offset is
        taken to be UTC.  Surrounding whitespace is ignored but kept in
        ``literal``.
        """
        match = _DATETIME_RE.match((text or "").strip())
        if match is None:
            raise ValueError(f"Not an ISO 8601 date-time: {text!r}")

        fraction = match.group("fraction") or "0"
        microsecond = int(fraction[:6].ljust(6, "0"))
        value = datetime(
            int(match.group("year")),
            int(match.group("month")),
            int(match.group("day")),
            int(match.group("hour")),
            int(match.group("minute")),
            int(match.group("second")),
            microsecond,
            tzinfo=_parse_offset(match.group("tz")),
        )
        return cls(value=value, literal=text, is_date=False)

    @classmethod
    def parse_date(cls, text: str) -> Timestamp:
        """Parse an ISO 8601 calendar date (``YYYY-MM-DD`` or ``YYYYMMDD``)."""
        match = _DATE_RE.match((text or "").strip())
        if match is None:
            raise ValueError(f"Not an ISO 8601 date: {text!r}")
        day = date(int(match.group("year")), int(match.group("month")), int(match.group("day")))
        return cls(
            value=datetime.combine(day, time(0, 0), tzinfo=timezone.utc),
            literal=text,
            is_date=True,
        )

    @classmethod
    def from_datetime(cls, value: datetime, is_date: bool = False) -> Timestamp:
        """Build a timestamp with a canonical literal.

        Naive datetimes are taken to be UTC.
        """
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        if is_date:
            return cls(value=value, literal=value.date().isoformat(), is_date=True)

        utc = value.astimezone(timezone.utc)
        literal = utc.strftime("%Y-%m-%dT%H:%M:%S")
        if utc.microsecond:
            literal += f".{utc.microsecond:06d}"
        return cls(value=value, literal=literal + "Z", is_date=False)

    def __str__(self) -> str:
        return self.literal


def parse_timestamp(
    node: etree._Element,
    text: str | None,
    property_name: str | None = None,
    allow_date: bool = False,
) -> Timestamp:
    """Parse *text* read from *node*, raising a taxonomy error on failure.

    With *allow_date*, a bare calendar date is accepted as well.
    """
    if text is not None:
        if allow_date:
            try:
                return Timestamp.parse_date(text)
            except ValueError:
                pass
        try:
            return Timestamp.parse(text)
        except ValueError:
            pass
    raise not_iso8601_format(node, text or "", property_name)
