"""
Calendar times for SAC headers.

A SAC file stores its reference time in six integer fields
(nzyear, nzjday, nzhour, nzmin, nzsec, nzmsec) and every time field
(b, e, o, a, f, t0-t9) as seconds relative to it. ``DateTime`` carries
both calendar forms (month/day and day of year) together with the
epoch seconds; calendar arithmetic is delegated to ``obspy.UTCDateTime``.
"""
from __future__ import annotations
import logging
import math
import re
from dataclasses import dataclass
from typing import Tuple

from obspy import UTCDateTime

from .config import SAC_INT_UNDEF, REFERENCE_FIELDS
from .errors import DatetimeParseError

LOGGER = logging.getLogger(__name__)

DATETIME_RE = re.compile(
    r"^\s*([+-]?\d+)-(\d+)-(\d+)T(\d+):(\d+):(\d+(?:\.\d*)?|\.\d+)\s*$")

@dataclass(frozen=True)
class DateTime:
    year: int
    month: int
    day: int
    doy: int
    hour: int
    minute: int
    second: int
    msec: int
    epoch: float

    @classmethod
    def undefined(cls) -> "DateTime":
        u = SAC_INT_UNDEF
        return cls(u, u, u, u, u, u, u, u, float(u))

    @property
    def is_undefined(self) -> bool:
        return self.year == SAC_INT_UNDEF

    def reference_values(self) -> Tuple[int, ...]:
        """Values for nzyear, nzjday, nzhour, nzmin, nzsec, nzmsec."""
        return (self.year, self.doy, self.hour, self.minute, self.second, self.msec)

    def isoformat(self) -> str:
        if self.is_undefined:
            return "undef"
        return "%04d-%02d-%02dT%02d:%02d:%02d.%03d" % (
            self.year, self.month, self.day,
            self.hour, self.minute, self.second, self.msec)

# ---------- calendar helpers ----------
def doy_to_month_day(year: int, doy: int) -> Tuple[int, int]:
    t = UTCDateTime(year=year, julday=doy)
    if t.year != year:
        raise ValueError("day %d is out of range for year %d" % (doy, year))
    return t.month, t.day

def month_day_to_doy(year: int, month: int, day: int) -> int:
    return UTCDateTime(year, month, day).julday

def calendar_to_epoch(year: int, month: int, day: int, hour: int,
                      minute: int, second: int, msec: int) -> float:
    # seconds and msec are added afterwards so 60 s or 1000 ms roll over
    t = UTCDateTime(year, month, day, hour, minute)
    return t.timestamp + second + msec / 1000.0

def epoch_to_calendar(epoch: float) -> Tuple[int, int, int, int, int, int, int, int]:
    """Return (year, doy, month, day, hour, minute, second, msec), nearest msec."""
    t = UTCDateTime(ns=int(round(epoch * 1000.0)) * 1000000)
    return (t.year, t.julday, t.month, t.day,
            t.hour, t.minute, t.second, t.microsecond // 1000)

# ---------- DateTime construction ----------
def datetime_from_epoch(epoch: float) -> DateTime:
    year, doy, month, day, hour, minute, second, msec = epoch_to_calendar(epoch)
    epoch = int(round(epoch * 1000.0)) / 1000.0
    return DateTime(year, month, day, doy, hour, minute, second, msec, epoch)

def datetime_new(year: int, month: int, day: int, hour: int,
                 minute: int, second: int, msec: int) -> DateTime:
    epoch = calendar_to_epoch(year, month, day, hour, minute, second, msec)
    return datetime_from_epoch(epoch)

def parse_datetime(text: str) -> DateTime:
    m = DATETIME_RE.match(text)
    if m is None:
        raise DatetimeParseError(text, "expected yyyy-mm-ddThh:mm:ss.mmm")
    year, month, day, hour, minute = (int(g) for g in m.groups()[:5])
    secs = float(m.group(6))
    second = int(math.floor(secs))
    msec = int(math.floor((secs - second) * 1000 + 0.5))
    try:
        return datetime_new(year, month, day, hour, minute, second, msec)
    except (ValueError, TypeError, OverflowError) as e:
        raise DatetimeParseError(text, str(e))

def looks_like_datetime(value: str, sep: str = "T") -> bool:
    return sep in value

# ---------- reference time ----------
def reference_of(header) -> DateTime:
    """
    Reference time of a header. Undefined calendar fields give the
    undefined DateTime instead of an error.
    """
    year, doy, hour, minute, second, msec = (int(header.get(k)) for k in REFERENCE_FIELDS)
    if SAC_INT_UNDEF in (year, doy, hour, minute, second, msec):
        return DateTime.undefined()
    try:
        month, day = doy_to_month_day(year, doy)
        return datetime_new(year, month, day, hour, minute, second, msec)
    except (ValueError, TypeError, OverflowError) as e:
        LOGGER.warning("Invalid reference time %d-%03d %02d:%02d:%02d.%03d: %s",
                       year, doy, hour, minute, second, msec, e)
        return DateTime.undefined()

def datetime_add(dt: DateTime, span: float) -> DateTime:
    if dt.is_undefined:
        return dt
    return datetime_from_epoch(dt.epoch + span)
