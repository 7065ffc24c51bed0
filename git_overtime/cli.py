"""
git-overtime command line.

  git-overtime history [--all] <user_email> <path>
      Classify the user's commits in one repository (or, with --all, every
      repository below <path>) and write git-history.<user>.<stamp>.csv
      into <path>.

  git-overtime by-day <history_csv> <output_dir>
      Summarise a history file into overtime-by-day.<stamp>.csv.

Working hours come from the environment / .env (see git_overtime.config).
"""
import argparse
import logging
import os

from .by_day import aggregate_by_day
from .config import load_config
from .csv_io import (
    day_filename,
    history_filename,
    read_history_csv,
    write_day_overtime_csv,
    write_history_csv,
)
from .errors import GitError, OvertimeError
from .git_log import find_git_repos, parse_git_history
from .logger import setup_logger
from .overtime import classify_commits

logger = logging.getLogger(__name__)


def create_parser():
    parser = argparse.ArgumentParser(
        prog='git-overtime',
        description='Overtime evidence from git commit history.',
        epilog='Example: git-overtime history --all me@example.com ~/work',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument('--verbose', action='store_true', help='Debug logging')
    sub = parser.add_subparsers(dest='command', required=True)

    history = sub.add_parser('history', help='Write the per-commit history CSV')
    history.add_argument('--all', action='store_true',
                         help='Treat <path> as a folder and scan every repository below it')
    history.add_argument('user_email', help='Author email to filter commits on')
    history.add_argument('path', help='Repository path (or folder with --all); output goes here')

    by_day = sub.add_parser('by-day', help='Summarise a history CSV per day')
    by_day.add_argument('csv_path', help='History CSV written by the history command')
    by_day.add_argument('output_path', help='Folder for the summary CSV')

    return parser


def run_history(args, config):
    rows = []
    if args.all:
        print(f"Scanning every repository in: {args.path}")
        for repo in find_git_repos(args.path):
            print(f"Collecting history for: {repo}")
            try:
                rows.extend(classify_commits(parse_git_history(repo, args.user_email), config))
            except GitError as e:
                logger.warning("Skipping %s: %s", repo, e)
    else:
        print(f"Collecting history for: {args.path}")
        rows = classify_commits(parse_git_history(args.path, args.user_email), config)

    overtime = sum(1 for r in rows if r.info.is_overtime)
    print(f"Commits: {len(rows)} ({overtime} outside working hours)")

    output_file = os.path.join(args.path, history_filename(args.user_email))
    write_history_csv(rows, output_file, args.user_email, args.path, config)
    return output_file


def run_by_day(args, config):
    print(f"Computing overtime from: {args.csv_path}")
    rows = read_history_csv(args.csv_path)
    days = aggregate_by_day(rows, config)
    print(f"Days with overtime: {len(days)}")

    output_file = os.path.join(args.output_path, day_filename())
    write_day_overtime_csv(days, output_file)
    return output_file


def main(argv=None):
    args = create_parser().parse_args(argv)
    setup_logger(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = load_config()
        if args.command == 'history':
            output_file = run_history(args, config)
        else:
            output_file = run_by_day(args, config)
    except OvertimeError as e:
        print(f"Error: {e}")
        return 1
    except OSError as e:
        print(f"File Error: {e}")
        return 1

    print(f"Done -> {output_file}")
    return 0
