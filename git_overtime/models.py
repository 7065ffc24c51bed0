"""
Data models shared by the classifier, the aggregator and the adapters.

Times of day are kept as zero-padded "HH:MM" strings throughout; they compare
correctly as strings and are only converted to minutes for subtraction.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import FrozenSet, Optional


@dataclass(frozen=True)
class ShiftWindow:
    """Morning and afternoon working windows of one day.

    Boundaries must satisfy morning_start < morning_end < afternoon_start
    < afternoon_end. config.load_config checks this; the classifier assumes it.
    """
    morning_start: str
    morning_end: str
    afternoon_start: str
    afternoon_end: str

    def as_row(self) -> list[str]:
        return [self.morning_start, self.morning_end, self.afternoon_start, self.afternoon_end]


@dataclass(frozen=True)
class ScheduleConfig:
    cutover_date: date
    night_start: str
    night_end: str
    legacy_shift: ShiftWindow
    home_days: FrozenSet[int]
    home_shift: ShiftWindow
    office_days: FrozenSet[int]
    office_shift: ShiftWindow
    holidays: FrozenSet[date] = field(default_factory=frozenset)


@dataclass(frozen=True)
class Commit:
    """One commit as collected from git; everything but date/time is payload."""
    id: str
    date: date
    time: str
    title: str = ""
    project_name: str = ""
    branch: str = ""
    modified_files: int = 0
    added_lines: int = 0
    deleted_lines: int = 0


@dataclass(frozen=True)
class OvertimeInfo:
    is_overtime: bool = False
    is_saturday: bool = False
    is_sunday: bool = False
    overtime_minutes: int = 0


@dataclass(frozen=True)
class CommitOvertime:
    """A commit with its classification; one row of the history CSV."""
    commit: Commit
    info: OvertimeInfo

    @property
    def date(self) -> date:
        return self.commit.date

    @property
    def time(self) -> str:
        return self.commit.time

    @property
    def is_saturday(self) -> bool:
        return self.info.is_saturday

    @property
    def is_sunday(self) -> bool:
        return self.info.is_sunday


@dataclass
class DayTracker:
    """Earliest/latest off-hours timestamps seen for one calendar date."""
    min_before_morning: Optional[str] = None
    min_after_morning: Optional[str] = None
    max_before_afternoon: Optional[str] = None
    max_afterwork: Optional[str] = None
    min_night: Optional[str] = None
    max_night: Optional[str] = None
    min_saturday: Optional[str] = None
    max_saturday: Optional[str] = None
    min_sunday: Optional[str] = None
    max_sunday: Optional[str] = None
    min_holiday: Optional[str] = None
    max_holiday: Optional[str] = None


@dataclass(frozen=True)
class DayOvertime:
    date: date
    before_morning: int = 0
    after_morning: int = 0
    before_afternoon: int = 0
    afterwork: int = 0
    night: int = 0
    saturday: int = 0
    sunday: int = 0
    holiday: int = 0

    @property
    def total(self) -> int:
        return (self.before_morning + self.after_morning + self.before_afternoon
                + self.afterwork + self.night + self.saturday + self.sunday + self.holiday)
