"""HH:MM minute arithmetic and day-of-week helpers."""
from __future__ import annotations

import re
from datetime import date

# Zero-padded 24-hour time
HHMM_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")

SUNDAY = 0
SATURDAY = 6

BEFORE_MIDNIGHT = "23:59"
MIDNIGHT = "00:00"


def is_hhmm(value: str) -> bool:
    return bool(HHMM_RE.match(value or ""))


def to_minutes(hhmm: str) -> int:
    h, m = hhmm.split(":")
    return int(h) * 60 + int(m)


def minutes_between(start: str, end: str) -> int:
    """Minutes from start to end on the same day (negative if end < start)."""
    return to_minutes(end) - to_minutes(start)


def day_of_week(d: date) -> int:
    """0=Sunday .. 6=Saturday."""
    return (d.weekday() + 1) % 7
