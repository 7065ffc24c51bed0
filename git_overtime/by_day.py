"""
Daily overtime summary.

A day's off-hours work is measured as a span, not a sum: the distance from
the shift boundary to the earliest arrival / latest departure, or from the
first to the last commit for night, weekend and holiday work. A burst of commits in
the same evening therefore counts once.

Per category the tracker keeps:
  before_morning    earliest commit before morning start
  after_morning     latest lunch commit nearer to morning end
  before_afternoon  earliest lunch commit nearer to afternoon start
  afterwork         latest commit after afternoon end
  night/sat/sun     earliest and latest commit
  holiday           earliest and latest commit on a public holiday or PTO day
"""
from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date
from typing import Iterable, Protocol

from .models import DayOvertime, DayTracker, ScheduleConfig
from .overtime import closer_to_morning_end, is_night_time
from .timeutil import day_of_week, minutes_between
from .working_hours import is_holiday, resolve_working_hours

logger = logging.getLogger(__name__)


class ClassifiedEvent(Protocol):
    date: date
    time: str
    is_saturday: bool
    is_sunday: bool


def _widen_span(tracker: DayTracker, category: str, t: str) -> None:
    lo_attr, hi_attr = f"min_{category}", f"max_{category}"
    lo = getattr(tracker, lo_attr)
    hi = getattr(tracker, hi_attr)
    if lo is None:
        setattr(tracker, lo_attr, t)
    elif t < lo:
        setattr(tracker, lo_attr, t)
        setattr(tracker, hi_attr, lo if hi is None else max(hi, lo))
    elif hi is None or t > hi:
        setattr(tracker, hi_attr, t)


def track_event(tracker: DayTracker, event: ClassifiedEvent, config: ScheduleConfig) -> None:
    t = event.time
    if event.is_saturday:
        _widen_span(tracker, "saturday", t)
        return
    if event.is_sunday:
        _widen_span(tracker, "sunday", t)
        return
    if is_holiday(event.date, config):
        _widen_span(tracker, "holiday", t)
        return

    hours = resolve_working_hours(event.date, day_of_week(event.date), config)
    if hours is None:
        logger.debug("No shift on %s; skipping %s", event.date, t)
        return

    if is_night_time(t, config.night_start, config.night_end):
        _widen_span(tracker, "night", t)
    elif t < hours.morning_start:
        if tracker.min_before_morning is None or t < tracker.min_before_morning:
            tracker.min_before_morning = t
    elif hours.morning_end < t < hours.afternoon_start:
        if closer_to_morning_end(t, hours.morning_end, hours.afternoon_start):
            if tracker.min_after_morning is None or t > tracker.min_after_morning:
                tracker.min_after_morning = t
        elif tracker.max_before_afternoon is None or t < tracker.max_before_afternoon:
            tracker.max_before_afternoon = t
    elif t > hours.afternoon_end:
        if tracker.max_afterwork is None or t > tracker.max_afterwork:
            tracker.max_afterwork = t


def _span(lo, hi) -> int:
    if lo is None or hi is None:
        return 0
    return minutes_between(lo, hi)


def finalize_day(day: date, tracker: DayTracker, config: ScheduleConfig) -> DayOvertime:
    before_morning = after_morning = before_afternoon = afterwork = 0
    hours = resolve_working_hours(day, day_of_week(day), config)
    if hours is not None:
        if tracker.min_before_morning:
            before_morning = minutes_between(tracker.min_before_morning, hours.morning_start)
        if tracker.min_after_morning:
            after_morning = minutes_between(hours.morning_end, tracker.min_after_morning)
        if tracker.max_before_afternoon:
            before_afternoon = minutes_between(tracker.max_before_afternoon, hours.afternoon_start)
        if tracker.max_afterwork:
            afterwork = minutes_between(hours.afternoon_end, tracker.max_afterwork)

    return DayOvertime(
        date=day,
        before_morning=before_morning,
        after_morning=after_morning,
        before_afternoon=before_afternoon,
        afterwork=afterwork,
        night=_span(tracker.min_night, tracker.max_night),
        saturday=_span(tracker.min_saturday, tracker.max_saturday),
        sunday=_span(tracker.min_sunday, tracker.max_sunday),
        holiday=_span(tracker.min_holiday, tracker.max_holiday),
    )


def aggregate_by_day(events: Iterable[ClassifiedEvent], config: ScheduleConfig) -> list[DayOvertime]:
    """Collapse classified commits into one DayOvertime per date with any overtime.

    Input order does not matter. Output is in first-seen date order; callers
    that need a stable file sort by date (csv_io does).
    """
    trackers: dict[date, DayTracker] = defaultdict(DayTracker)
    for event in events:
        track_event(trackers[event.date], event, config)

    days = []
    for day, tracker in trackers.items():
        summary = finalize_day(day, tracker, config)
        if summary.total > 0:
            days.append(summary)
    logger.debug("Aggregated %d tracked day(s) into %d overtime day(s)", len(trackers), len(days))
    return days
