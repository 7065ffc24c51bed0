import subprocess
from datetime import date

import pytest

from git_overtime import git_log
from git_overtime.errors import GitError
from git_overtime.git_log import find_git_repos, parse_git_history


LOG_OUTPUT = "\n".join([
    'aaaaaaa1|Fix "login"; add test|2025-05-05|18:42',
    "bbbbbbb2|Merge branch 'a|b'|2025-05-10|09:15",
    "aaaaaaa1|Fix login; add test|2025-05-05|18:42",
    "garbage line",
    "ccccccc3|Bad date|yesterday|10:00",
    "",
])

SHOW_OUTPUT = {
    "aaaaaaa1": "aaaaaaa Fix\n 3 files changed, 12 insertions(+), 4 deletions(-)\n",
    "bbbbbbb2": "bbbbbbb Merge\n 1 file changed, 2 insertions(+)\n",
}


@pytest.fixture
def fake_git(monkeypatch):
    calls = []

    def check_output(cmd, text=True, stderr=None):
        calls.append(cmd)
        args = cmd[3:]
        if args[0] == "rev-parse":
            return "/home/me/code/my-app\n"
        if args[0] == "log":
            return LOG_OUTPUT
        if args[0] == "branch":
            return "* main\n  remotes/origin/main\n" if args[-1] == "aaaaaaa1" else ""
        if args[0] == "show":
            return SHOW_OUTPUT[args[-1]]
        raise AssertionError(f"unexpected git call {cmd}")

    monkeypatch.setattr(git_log.subprocess, "check_output", check_output)
    return calls


def test_parse_git_history(fake_git):
    commits = parse_git_history("/home/me/code/my-app", "me@example.com")

    assert [c.id for c in commits] == ["aaaaaaa1", "bbbbbbb2"]
    first, second = commits
    assert first.date == date(2025, 5, 5)
    assert first.time == "18:42"
    assert first.title == "Fix login, add test"
    assert first.project_name == "my-app"
    assert first.branch == "main"
    assert (first.modified_files, first.added_lines, first.deleted_lines) == (3, 12, 4)

    assert second.title == "Merge branch 'a|b'"
    assert second.branch == ""
    assert (second.modified_files, second.added_lines, second.deleted_lines) == (1, 2, 0)


def test_git_is_run_against_the_repository(fake_git):
    parse_git_history("/home/me/code/my-app", "me@example.com")

    log_call = next(cmd for cmd in fake_git if cmd[3] == "log")
    assert log_call[:3] == ["git", "-C", "/home/me/code/my-app"]
    assert "--author=me@example.com" in log_call
    assert "--all" in log_call


def test_failing_git_log_raises(monkeypatch):
    def check_output(cmd, text=True, stderr=None):
        raise subprocess.CalledProcessError(128, cmd)

    monkeypatch.setattr(git_log.subprocess, "check_output", check_output)

    with pytest.raises(GitError):
        parse_git_history("/not/a/repo", "me@example.com")


def test_find_git_repos(tmp_path):
    (tmp_path / "one" / ".git").mkdir(parents=True)
    (tmp_path / "group" / "two" / ".git" / "objects").mkdir(parents=True)
    (tmp_path / "plain").mkdir()

    repos = sorted(find_git_repos(str(tmp_path)))

    assert repos == [str(tmp_path / "group" / "two"), str(tmp_path / "one")]
