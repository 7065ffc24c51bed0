"""
Pytest configuration and shared fixtures.

Reference calendar used across the tests (May 2025):
  2025-05-05 Monday    office
  2025-05-07 Wednesday office
  2025-05-08 Thursday  home
  2025-05-09 Friday    home
  2025-05-10 Saturday
  2025-05-11 Sunday
  2024-01-15 Monday    before the cutover -> legacy hours
"""
from datetime import date

import pytest

from git_overtime.models import Commit, CommitOvertime, OvertimeInfo, ScheduleConfig, ShiftWindow


SCHEDULE_ENV = {
    "DATE_BEFORE": "2024-02-01",
    "NIGHT_TIME_START": "22:00",
    "NIGHT_TIME_END": "04:00",
    "BEFORE_DATE_MORNING_START": "09:00",
    "BEFORE_DATE_MORNING_END": "12:00",
    "BEFORE_DATE_AFTERNOON_START": "14:00",
    "BEFORE_DATE_AFTERNOON_END": "18:00",
    "CURRENT_HOME_DAYS": "4,5",
    "CURRENT_HOME_MORNING_START": "08:30",
    "CURRENT_HOME_MORNING_END": "12:00",
    "CURRENT_HOME_AFTERNOON_START": "14:00",
    "CURRENT_HOME_AFTERNOON_END": "17:30",
    "CURRENT_OFFICE_DAYS": "1,2,3",
    "CURRENT_OFFICE_MORNING_START": "08:30",
    "CURRENT_OFFICE_MORNING_END": "12:30",
    "CURRENT_OFFICE_AFTERNOON_START": "13:30",
    "CURRENT_OFFICE_AFTERNOON_END": "16:30",
}


@pytest.fixture
def schedule_env():
    """Environment equivalent of the `schedule` fixture."""
    return dict(SCHEDULE_ENV)


@pytest.fixture
def schedule():
    return ScheduleConfig(
        cutover_date=date(2024, 2, 1),
        night_start="22:00",
        night_end="04:00",
        legacy_shift=ShiftWindow("09:00", "12:00", "14:00", "18:00"),
        home_days=frozenset({4, 5}),
        home_shift=ShiftWindow("08:30", "12:00", "14:00", "17:30"),
        office_days=frozenset({1, 2, 3}),
        office_shift=ShiftWindow("08:30", "12:30", "13:30", "16:30"),
    )


@pytest.fixture
def make_commit():
    def _make(day: str, time: str, sha: str = "abc123") -> Commit:
        return Commit(
            id=sha,
            date=date.fromisoformat(day),
            time=time,
            title="Test commit",
            project_name="test-project",
            branch="main",
            modified_files=1,
            added_lines=10,
            deleted_lines=5,
        )
    return _make


@pytest.fixture
def make_event(make_commit):
    """Classified commit carrying only the weekend flags the aggregator reads."""
    def _make(day: str, time: str) -> CommitOvertime:
        weekday = date.fromisoformat(day).weekday()
        info = OvertimeInfo(
            is_overtime=weekday >= 5,
            is_saturday=weekday == 5,
            is_sunday=weekday == 6,
        )
        return CommitOvertime(commit=make_commit(day, time), info=info)
    return _make
