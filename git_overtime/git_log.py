"""
Git commit collection.

Commits are read with `git -C <repo> log --all --author=<email>`, one line
per commit as "sha|subject|YYYY-MM-DD|HH:MM" in the committer's local wall
clock, then enriched with the first containing branch and --stat counts.
"""
from __future__ import annotations

import logging
import os
import re
import subprocess
from datetime import date

from .errors import GitError
from .models import Commit

logger = logging.getLogger(__name__)

FILES_RE = re.compile(r"(\d+)\s+file")
INSERTIONS_RE = re.compile(r"(\d+)\s+insertion")
DELETIONS_RE = re.compile(r"(\d+)\s+deletion")


def run_git(repo: str, *args: str) -> str:
    cmd = ["git", "-C", repo, *args]
    try:
        return subprocess.check_output(cmd, text=True, stderr=subprocess.DEVNULL)
    except (subprocess.CalledProcessError, OSError) as e:
        raise GitError(f"{' '.join(cmd)} failed: {e}")


def find_git_repos(root: str):
    for dirpath, dirnames, filenames in os.walk(root):
        if ".git" in dirnames:
            yield dirpath
            dirnames[:] = [d for d in dirnames if d != ".git"]


def project_name(repo: str) -> str:
    toplevel = run_git(repo, "rev-parse", "--show-toplevel").strip()
    return os.path.basename(toplevel)


def first_branch(repo: str, sha: str) -> str:
    try:
        out = run_git(repo, "branch", "--all", "--contains", sha)
    except GitError:
        return ""
    lines = [line for line in out.splitlines() if line.strip()]
    if not lines:
        return ""
    return lines[0].replace("*", "").strip().replace(";", ",")


def _count(pattern: re.Pattern, text: str) -> int:
    match = pattern.search(text)
    return int(match.group(1)) if match else 0


def commit_stats(repo: str, sha: str) -> tuple[int, int, int]:
    """(modified files, added lines, deleted lines) from `git show --stat`."""
    try:
        out = run_git(repo, "show", "--stat", "--oneline", sha)
    except GitError:
        return 0, 0, 0
    return _count(FILES_RE, out), _count(INSERTIONS_RE, out), _count(DELETIONS_RE, out)


def clean_title(subject: str) -> str:
    return subject.replace('"', "").replace(";", ",")


def parse_git_history(repo_path: str, user_email: str) -> list[Commit]:
    name = project_name(repo_path)
    out = run_git(
        repo_path, "log", "--all",
        f"--author={user_email}",
        "--pretty=format:%H|%s|%ad",
        "--date=format:%Y-%m-%d|%H:%M",
    )

    commits = []
    seen = set()
    for line in out.splitlines():
        if not line.strip():
            continue
        try:
            sha, *subject_parts, commit_date, commit_time = line.split("|")
        except ValueError:
            logger.debug("Skipping unparsable git log line: %r", line)
            continue
        if not subject_parts:
            logger.debug("Skipping unparsable git log line: %r", line)
            continue
        if sha in seen:
            continue
        seen.add(sha)

        try:
            day = date.fromisoformat(commit_date)
        except ValueError:
            logger.debug("Skipping commit %s with bad date %r", sha[:7], commit_date)
            continue

        modified, added, deleted = commit_stats(repo_path, sha)
        commits.append(Commit(
            id=sha,
            date=day,
            time=commit_time,
            title=clean_title("|".join(subject_parts)),
            project_name=name,
            branch=first_branch(repo_path, sha),
            modified_files=modified,
            added_lines=added,
            deleted_lines=deleted,
        ))
    logger.debug("%s: %d commit(s) by %s", name, len(commits), user_email)
    return commits
