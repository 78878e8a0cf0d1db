"""Error types for shell detection and history access.

Every failure surfaced by this package derives from ShellError so that
presentation layers can catch one type and print its message.
"""

from typing import Optional


class ShellError(Exception):
    """Base class for shell environment errors."""
    pass


class UnsupportedShellType(ShellError):
    """A shell name did not match any supported shell variant."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Unsupported shell type: {value}")


class FailedToExecuteCommand(ShellError):
    """The shell subprocess could not be spawned or gave no usable result."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Failed to execute shell command. Error: {reason}")


class FailedToAddCommandToHistory(ShellError):
    """The shell subprocess ran but exited with a non-zero status."""

    def __init__(self, returncode: Optional[int] = None):
        self.returncode = returncode
        if returncode is None:
            message = "Failed to add command to shell history"
        else:
            message = f"Failed to add command to shell history. Error: {returncode}"
        super().__init__(message)


class FailedToReadShellHistory(ShellError):
    """The history file could not be opened or read."""

    def __init__(self, error: OSError):
        self.error = error
        super().__init__(f"Failed to read shell history: {error}")


class FailedToExtractSystemInfo(ShellError):
    """A required host attribute (OS name, CPU architecture) is unavailable."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Failed to extract system info: {reason}")
