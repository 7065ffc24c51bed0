"""
Per-commit overtime classification.

Order of checks (first match wins):
  1. Saturday / Sunday       -> overtime, duration left to the daily summary
  2. no shift for the day    -> overtime, duration unmeasured
  3. night window            -> minutes since night start (spans midnight)
  4. before morning start    -> minutes until morning start
  5. lunch break             -> minutes to the nearer lunch boundary
  6. after afternoon end     -> minutes since afternoon end
Boundary times themselves are never overtime.
"""
from __future__ import annotations

from typing import Iterable

from .models import Commit, CommitOvertime, OvertimeInfo, ScheduleConfig
from .timeutil import BEFORE_MIDNIGHT, MIDNIGHT, SATURDAY, SUNDAY, day_of_week, minutes_between
from .working_hours import resolve_working_hours


def is_night_time(t: str, night_start: str, night_end: str) -> bool:
    return t > night_start or t < night_end


def night_overtime(t: str, night_start: str, night_end: str) -> int:
    if t > night_start:
        return minutes_between(night_start, t)
    if t < night_end:
        # 23:59 rather than 24:00: the evening segment is one minute short
        return minutes_between(night_start, BEFORE_MIDNIGHT) + minutes_between(MIDNIGHT, t)
    return 0


def closer_to_morning_end(t: str, morning_end: str, afternoon_start: str) -> bool:
    """True when t sits nearer to morning end than to afternoon start; ties go to the afternoon."""
    return minutes_between(morning_end, t) < minutes_between(t, afternoon_start)


def lunch_overtime(t: str, morning_end: str, afternoon_start: str) -> int:
    return min(minutes_between(morning_end, t), minutes_between(t, afternoon_start))


def classify(commit: Commit, config: ScheduleConfig) -> OvertimeInfo:
    dow = day_of_week(commit.date)
    if dow == SATURDAY:
        return OvertimeInfo(is_overtime=True, is_saturday=True)
    if dow == SUNDAY:
        return OvertimeInfo(is_overtime=True, is_sunday=True)

    hours = resolve_working_hours(commit.date, dow, config)
    if hours is None:
        return OvertimeInfo(is_overtime=True)

    t = commit.time
    night = night_overtime(t, config.night_start, config.night_end)
    if night > 0:
        return OvertimeInfo(is_overtime=True, overtime_minutes=night)

    if t < hours.morning_start:
        minutes = minutes_between(t, hours.morning_start)
    elif hours.morning_end < t < hours.afternoon_start:
        minutes = lunch_overtime(t, hours.morning_end, hours.afternoon_start)
    elif t > hours.afternoon_end:
        minutes = minutes_between(hours.afternoon_end, t)
    else:
        return OvertimeInfo()
    return OvertimeInfo(is_overtime=True, overtime_minutes=minutes)


def classify_commits(commits: Iterable[Commit], config: ScheduleConfig) -> list[CommitOvertime]:
    return [CommitOvertime(commit=c, info=classify(c, config)) for c in commits]
