class OvertimeError(Exception):
    """Base exception for git-overtime."""


class ConfigError(OvertimeError):
    """Raised when the schedule configuration is missing or invalid."""


class GitError(OvertimeError):
    """Raised when a git command fails for a repository."""


class HistoryFormatError(OvertimeError):
    """Raised when a history CSV has no commit data section."""
