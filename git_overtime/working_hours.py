from __future__ import annotations

from datetime import date
from typing import Optional

from .models import ScheduleConfig, ShiftWindow


def is_holiday(day: date, config: ScheduleConfig) -> bool:
    """Public holiday or PTO day on the current schedule; legacy days never are."""
    return day >= config.cutover_date and day in config.holidays


def resolve_working_hours(day: date, dow: int, config: ScheduleConfig) -> Optional[ShiftWindow]:
    """Shift window that applies on `day`, or None when nobody works.

    The cutover date wins over everything else: anything strictly before it
    uses the legacy shift. After it, holidays (empty unless configured) have
    no shift at all.
    """
    if day < config.cutover_date:
        return config.legacy_shift
    if day in config.holidays:
        return None
    if dow in config.home_days:
        return config.home_shift
    if dow in config.office_days:
        return config.office_shift
    return None
