"""Overtime evidence from git history.

Commits are classified against daily shift schedules (legacy, home, office)
and collapsed into a per-day overtime summary.

Modules:
  - models:        data structures shared by every stage
  - timeutil:      HH:MM minute arithmetic and weekday index
  - working_hours: which shift applies to a given day
  - overtime:      per-commit classification
  - by_day:        per-day aggregation
  - config:        .env / environment loading
  - git_log:       git history ingestion
  - csv_io:        history and summary CSV files
  - cli:           command line entry point
"""

__version__ = "1.0.0"

__all__ = [
    'models',
    'timeutil',
    'working_hours',
    'overtime',
    'by_day',
    'config',
    'git_log',
    'csv_io',
    'cli',
]
