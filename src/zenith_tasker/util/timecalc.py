# src/zenith_tasker/util/timecalc.py

"""
Wall-clock time helpers for the task form.

A task's start, end and duration are edited one field at a time; after each
edit the other fields are recomputed so that end == start + duration:

- edit start    -> end = start + duration
- edit end      -> duration = end - start (clamped to 0)
- edit duration -> end = start + duration

Arithmetic is done in minutes modulo one day, so only the time of day matters,
end times wrap past midnight and any duration, however large, stays in range.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace
from datetime import time

logger = logging.getLogger(__name__)

_MINUTES_PER_DAY = 24 * 60
_HHMM_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*$")


class InvalidTimeError(ValueError):
    """Raised for text that is not a valid 24h HH:MM time."""


def parse_hhmm(text: str) -> time:
    m = _HHMM_RE.match(text or "")
    if not m:
        raise InvalidTimeError(f"not a HH:MM time: {text!r}")
    hour, minute = int(m.group(1)), int(m.group(2))
    if hour > 23 or minute > 59:
        raise InvalidTimeError(f"time out of range: {text!r}")
    return time(hour, minute)


def format_hhmm(t: time) -> str:
    return f"{t.hour:02d}:{t.minute:02d}"


def _minute_of_day(t: time) -> int:
    return t.hour * 60 + t.minute


def add_minutes(hhmm: str, minutes: int) -> str:
    """Return hhmm shifted by `minutes`, wrapping at midnight."""
    total = (_minute_of_day(parse_hhmm(hhmm)) + int(minutes)) % _MINUTES_PER_DAY
    return format_hhmm(time(total // 60, total % 60))


def minutes_between(start: str, end: str) -> int:
    """Signed minutes from start to end on the same day."""
    return _minute_of_day(parse_hhmm(end)) - _minute_of_day(parse_hhmm(start))


@dataclass(frozen=True, slots=True)
class TimeRange:
    start: str
    end: str
    duration: int

    def with_start(self, value: str, *, strict: bool = False) -> TimeRange:
        try:
            start = format_hhmm(parse_hhmm(value))
            return replace(self, start=start, end=add_minutes(start, self.duration))
        except InvalidTimeError:
            return self._rejected("start", value, strict)

    def with_end(self, value: str, *, strict: bool = False) -> TimeRange:
        try:
            end = format_hhmm(parse_hhmm(value))
            diff = minutes_between(self.start, end)
        except InvalidTimeError:
            return self._rejected("end", value, strict)
        # End before start never yields a negative duration.
        return replace(self, end=end, duration=max(0, diff))

    def with_duration(self, value: int | str, *, strict: bool = False) -> TimeRange:
        try:
            minutes = max(0, int(value))
        except (TypeError, ValueError, OverflowError):
            if strict:
                raise InvalidTimeError(f"not a duration in minutes: {value!r}") from None
            logger.warning("Ignoring invalid duration %r; keeping %s", value, self)
            return self
        try:
            return replace(self, duration=minutes, end=add_minutes(self.start, minutes))
        except InvalidTimeError:
            return self._rejected("start", self.start, strict)

    def _rejected(self, field_name: str, value: str, strict: bool) -> TimeRange:
        if strict:
            raise InvalidTimeError(f"invalid {field_name} time: {value!r}")
        logger.warning("Ignoring invalid %s time %r; keeping %s", field_name, value, self)
        return self


DEFAULT_RANGE = TimeRange(start="09:00", end="10:00", duration=60)
