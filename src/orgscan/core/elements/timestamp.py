"""Timestamp parsing for planning lines: active, inactive, ranges and diary sexps"""

import re
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict


TimestampKind = Literal["active", "inactive", "active_range", "inactive_range", "diary"]

_BODY = (
    r'(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})'
    r'(?:[ \t]+(?P<dayname>[^\s\d+\-\]>]+))?'
    r'(?:[ \t]+(?P<hour>\d{1,2}):(?P<minute>\d{2})'
    r'(?:-(?P<end_hour>\d{1,2}):(?P<end_minute>\d{2}))?)?'
    r'(?:[ \t]+(?P<repeater>(?:\+\+|\.\+|\+)\d+[hdwmy]))?'
    r'(?:[ \t]+(?P<delay>--?\d+[hdwmy]))?'
    r'[ \t]*'
)
ACTIVE_RE = re.compile('<' + _BODY + '>')
INACTIVE_RE = re.compile(r'\[' + _BODY + r'\]')
DIARY_RE = re.compile(r'<%%(\([^>\n]*\))>')


class Datetime(BaseModel):
    model_config = ConfigDict(frozen=True)

    year:    int
    month:   int
    day:     int
    dayname: Optional[str] = None
    hour:    Optional[int] = None
    minute:  Optional[int] = None


class Timestamp(BaseModel):
    """A parsed timestamp; `end` is only set on ranges, `value` only on diary sexps."""
    model_config = ConfigDict(frozen=True)

    kind:     TimestampKind
    start:    Optional[Datetime] = None
    end:      Optional[Datetime] = None
    repeater: Optional[str] = None
    delay:    Optional[str] = None
    value:    Optional[str] = None

    def is_active(self) -> bool:
        return self.kind in ("active", "active_range", "diary")

    def is_range(self) -> bool:
        return self.end is not None


def _start(m: re.Match) -> Datetime:
    hour = m.group('hour')
    return Datetime(
        year=int(m.group('year')),
        month=int(m.group('month')),
        day=int(m.group('day')),
        dayname=m.group('dayname'),
        hour=int(hour) if hour else None,
        minute=int(m.group('minute')) if hour else None,
    )


def _same_day_end(m: re.Match) -> Optional[Datetime]:
    """End of a '10:00-12:00' time range within a single day."""
    if not m.group('end_hour'):
        return None
    return Datetime(
        year=int(m.group('year')),
        month=int(m.group('month')),
        day=int(m.group('day')),
        dayname=m.group('dayname'),
        hour=int(m.group('end_hour')),
        minute=int(m.group('end_minute')),
    )


def _parse_kind(text: str, pattern: re.Pattern, single: str, ranged: str) -> Optional[tuple[str, Timestamp]]:
    m = pattern.match(text)
    if not m:
        return None
    start = _start(m)
    rest = text[m.end():]

    if rest.startswith('--'):
        m2 = pattern.match(rest, 2)
        if m2 and not m2.group('end_hour'):
            return rest[m2.end():], Timestamp(
                kind=ranged,
                start=start,
                end=_start(m2),
                repeater=m.group('repeater'),
                delay=m.group('delay'),
            )

    end = _same_day_end(m)
    return rest, Timestamp(
        kind=ranged if end else single,
        start=start,
        end=end,
        repeater=m.group('repeater'),
        delay=m.group('delay'),
    )


def parse_active(text: str) -> Optional[tuple[str, Timestamp]]:
    """Parse '<2003-09-16 Tue 09:39>' (or a range of two) at the start of text."""
    return _parse_kind(text, ACTIVE_RE, "active", "active_range")


def parse_inactive(text: str) -> Optional[tuple[str, Timestamp]]:
    """Parse '[2003-09-16 Tue]' (or a range of two) at the start of text."""
    return _parse_kind(text, INACTIVE_RE, "inactive", "inactive_range")


def parse_diary(text: str) -> Optional[tuple[str, Timestamp]]:
    """Parse '<%%(diary-sexp)>' at the start of text."""
    m = DIARY_RE.match(text)
    if not m:
        return None
    return text[m.end():], Timestamp(kind="diary", value=m.group(1))


def parse_timestamp(text: str) -> Optional[tuple[str, Timestamp]]:
    """Parse any timestamp form at the start of text; None if there is none."""
    return parse_diary(text) or parse_active(text) or parse_inactive(text)
