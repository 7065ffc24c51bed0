"""
History and daily summary CSV files (';' delimited).

History file layout:
  user;repository                        <- preamble: who/where and the
  <email>;<path>                            working hours in effect
  ...
  project_name;commit_id;...;overtime_in_min   <- commit data header
  <one row per commit>
"""
from __future__ import annotations

import csv
from datetime import date, datetime
from pathlib import Path
from typing import Iterable

from .errors import HistoryFormatError
from .models import Commit, CommitOvertime, DayOvertime, OvertimeInfo, ScheduleConfig

DELIMITER = ";"

HISTORY_COLUMNS = [
    "project_name", "commit_id", "branch", "commit_title",
    "modified_files", "added_lines", "deleted_lines",
    "date", "time", "is_overtime", "is_saturday", "is_sunday", "overtime_in_min",
]

DAY_COLUMNS = [
    "date", "before_morning", "after_morning", "before_afternoon",
    "afterwork", "night", "saturday", "sunday", "holiday", "total",
]


def timestamp_suffix(now: datetime | None = None) -> str:
    return (now or datetime.now()).strftime("%Y-%m-%d-%H-%M")


def history_filename(user_email: str, now: datetime | None = None) -> str:
    return f"git-history.{user_email.split('@')[0]}.{timestamp_suffix(now)}.csv"


def day_filename(now: datetime | None = None) -> str:
    return f"overtime-by-day.{timestamp_suffix(now)}.csv"


def _days(days: Iterable[int]) -> str:
    return " ".join(str(d) for d in sorted(days))


def _flag(value: bool) -> int:
    return 1 if value else 0


def write_history_csv(rows: Iterable[CommitOvertime], path: str | Path, user_email: str,
                      repo_path: str, config: ScheduleConfig) -> None:
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f, delimiter=DELIMITER)
        w.writerow(["user", "repository"])
        w.writerow([user_email, repo_path])
        w.writerow([])

        w.writerow([f"Before {config.cutover_date.isoformat()} working hours",
                    "morning_start", "morning_end", "afternoon_start", "afternoon_end"])
        w.writerow([""] + config.legacy_shift.as_row())
        w.writerow([])

        w.writerow(["Current working hours at office",
                    "morning_start", "morning_end", "afternoon_start", "afternoon_end"])
        w.writerow([_days(config.office_days)] + config.office_shift.as_row())
        w.writerow([])

        w.writerow(["Current working hours at home",
                    "morning_start", "morning_end", "afternoon_start", "afternoon_end"])
        w.writerow([_days(config.home_days)] + config.home_shift.as_row())
        w.writerow([])

        w.writerow(HISTORY_COLUMNS)
        for r in rows:
            c, info = r.commit, r.info
            w.writerow([
                c.project_name,
                c.id,
                c.branch,
                c.title,
                c.modified_files,
                c.added_lines,
                c.deleted_lines,
                c.date.isoformat(),
                c.time,
                _flag(info.is_overtime),
                _flag(info.is_saturday),
                _flag(info.is_sunday),
                info.overtime_minutes,
            ])


def read_history_csv(path: str | Path) -> list[CommitOvertime]:
    rows = []
    inside_data = False
    with open(path, newline="", encoding="utf-8") as f:
        reader = csv.reader(f, delimiter=DELIMITER)
        for parts in reader:
            if not inside_data:
                inside_data = parts == HISTORY_COLUMNS
                continue
            if len(parts) < len(HISTORY_COLUMNS) or not any(p.strip() for p in parts):
                continue
            try:
                commit = Commit(
                    id=parts[1],
                    date=date.fromisoformat(parts[7]),
                    time=parts[8],
                    title=parts[3],
                    project_name=parts[0],
                    branch=parts[2],
                    modified_files=int(parts[4] or 0),
                    added_lines=int(parts[5] or 0),
                    deleted_lines=int(parts[6] or 0),
                )
                info = OvertimeInfo(
                    is_overtime=parts[9] == "1",
                    is_saturday=parts[10] == "1",
                    is_sunday=parts[11] == "1",
                    overtime_minutes=int(parts[12] or 0),
                )
            except ValueError as e:
                raise HistoryFormatError(f"{path}, line {reader.line_num}: {e}")
            rows.append(CommitOvertime(commit=commit, info=info))
    if not inside_data:
        raise HistoryFormatError(f"No commit data header found in {path}")
    return rows


def write_day_overtime_csv(days: Iterable[DayOvertime], path: str | Path) -> None:
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f, delimiter=DELIMITER)
        w.writerow(DAY_COLUMNS)
        for d in sorted(days, key=lambda d: d.date):
            w.writerow([
                d.date.isoformat(),
                d.before_morning,
                d.after_morning,
                d.before_afternoon,
                d.afterwork,
                d.night,
                d.saturday,
                d.sunday,
                d.holiday,
                d.total,
            ])
