"""
Schedule configuration from the environment (a .env file is loaded if present).

Required:
  DATE_BEFORE=YYYY-MM-DD                 legacy hours apply strictly before this date
  NIGHT_TIME_START=HH:MM, NIGHT_TIME_END=HH:MM
  BEFORE_DATE_MORNING_START/_MORNING_END/_AFTERNOON_START/_AFTERNOON_END
  CURRENT_HOME_DAYS=4,5                  0=Sunday .. 6=Saturday
  CURRENT_HOME_MORNING_START/...         same four boundaries
  CURRENT_OFFICE_DAYS=1,2,3
  CURRENT_OFFICE_MORNING_START/...

Optional:
  HOLIDAYS_COUNTRY=FR  HOLIDAYS_PROV=    public holidays on or after DATE_BEFORE have no shift;
                                         work on them is measured first to last commit
  PTO_DAYS=2025-05-02,2025-08-14         personal days off, same treatment
"""
from __future__ import annotations

import os
from datetime import date
from typing import Mapping, Optional

import holidays as pyholidays
from dotenv import load_dotenv

from .errors import ConfigError
from .models import ScheduleConfig, ShiftWindow
from .timeutil import is_hhmm

SHIFT_FIELDS = ("MORNING_START", "MORNING_END", "AFTERNOON_START", "AFTERNOON_END")


def get_env(env: Mapping[str, str], key: str) -> str:
    value = (env.get(key) or "").strip()
    if not value:
        raise ConfigError(f"Missing environment variable: {key}")
    return value


def parse_time(env: Mapping[str, str], key: str) -> str:
    value = get_env(env, key)
    if not is_hhmm(value):
        raise ConfigError(f"{key} must be a zero-padded HH:MM time, got {value!r}")
    return value


def parse_date(value: str, key: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise ConfigError(f"{key} must be an ISO date (YYYY-MM-DD), got {value!r}")


def parse_days(env: Mapping[str, str], key: str) -> frozenset:
    raw = get_env(env, key)
    days = set()
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            day = int(part)
        except ValueError:
            raise ConfigError(f"{key} must list weekday numbers, got {part!r}")
        if not 0 <= day <= 6:
            raise ConfigError(f"{key}: weekday {day} out of range (0=Sunday .. 6=Saturday)")
        days.add(day)
    return frozenset(days)


def parse_shift(env: Mapping[str, str], prefix: str) -> ShiftWindow:
    shift = ShiftWindow(*(parse_time(env, f"{prefix}_{name}") for name in SHIFT_FIELDS))
    bounds = shift.as_row()
    if bounds != sorted(bounds) or len(set(bounds)) != len(bounds):
        raise ConfigError(
            f"{prefix} working hours must be strictly increasing "
            f"(morning start < morning end < afternoon start < afternoon end), got {' '.join(bounds)}"
        )
    return shift


def load_holidays(env: Mapping[str, str], cutover_date: date) -> frozenset:
    """Public holidays and PTO days; only days from the cutover onwards matter."""
    days_off = set()
    for d_str in (env.get("PTO_DAYS") or "").split(","):
        d_str = d_str.strip()
        if d_str:
            days_off.add(parse_date(d_str, "PTO_DAYS"))

    country = (env.get("HOLIDAYS_COUNTRY") or "").strip()
    if country:
        years = range(cutover_date.year, date.today().year + 2)
        try:
            calendar = pyholidays.country_holidays(
                country, subdiv=(env.get("HOLIDAYS_PROV") or "").strip() or None, years=years
            )
        except NotImplementedError as e:
            raise ConfigError(f"Unsupported holidays country/subdivision: {e}")
        days_off.update(calendar.keys())
    return frozenset(days_off)


def load_config(env: Optional[Mapping[str, str]] = None) -> ScheduleConfig:
    """Build and validate the schedule; `env` defaults to os.environ after load_dotenv()."""
    if env is None:
        load_dotenv()
        env = os.environ

    home_days = parse_days(env, "CURRENT_HOME_DAYS")
    office_days = parse_days(env, "CURRENT_OFFICE_DAYS")
    overlap = home_days & office_days
    if overlap:
        raise ConfigError(f"Days {sorted(overlap)} are both home and office days")

    cutover_date = parse_date(get_env(env, "DATE_BEFORE"), "DATE_BEFORE")
    return ScheduleConfig(
        cutover_date=cutover_date,
        night_start=parse_time(env, "NIGHT_TIME_START"),
        night_end=parse_time(env, "NIGHT_TIME_END"),
        legacy_shift=parse_shift(env, "BEFORE_DATE"),
        home_days=home_days,
        home_shift=parse_shift(env, "CURRENT_HOME"),
        office_days=office_days,
        office_shift=parse_shift(env, "CURRENT_OFFICE"),
        holidays=load_holidays(env, cutover_date),
    )
