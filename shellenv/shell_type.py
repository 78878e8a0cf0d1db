"""Shell variant detection and history file location.

The active shell is inferred from environment variables only. Resolution
takes an explicit environment mapping so callers (and tests) can pass a
snapshot instead of the live process environment.
"""

import logging
import os
import subprocess
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Mapping, Optional

from .errors import FailedToExecuteCommand, UnsupportedShellType
from .path_utils import home_dir

logger = logging.getLogger(__name__)

# PowerShell Core query for its PSReadLine history file
PWSH_HISTORY_PATH_QUERY = "(Get-PSReadlineOption).HistorySavePath"


class ShellType(Enum):
    """Supported interactive shells. Values are the display names."""
    ZSH = "zsh"
    BASH = "bash"
    PWSH = "pwsh"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, value: str) -> "ShellType":
        """Parse a shell name such as a user-supplied override.

        Matching ignores case and surrounding whitespace.

        Raises:
            UnsupportedShellType: If the name matches no variant.
        """
        normalized = (value or "").strip().lower()
        for shell_type in cls:
            if shell_type.value == normalized:
                return shell_type
        raise UnsupportedShellType(value)

    @property
    def executable_name(self) -> str:
        """Name used to invoke this shell as a subprocess."""
        return _SHELL_TABLE[self].executable


@dataclass(frozen=True)
class _ShellEntry:
    executable: str
    history_file_name: Optional[str]  # None: shell must be asked


_SHELL_TABLE = {
    ShellType.ZSH: _ShellEntry(executable="zsh", history_file_name=".zsh_history"),
    ShellType.BASH: _ShellEntry(executable="bash", history_file_name=".bash_history"),
    ShellType.PWSH: _ShellEntry(executable="pwsh", history_file_name=None),
}


def resolve_shell_type(environ: Optional[Mapping[str, str]] = None) -> ShellType:
    """Infer the active shell from an environment snapshot.

    Precedence (first match wins):
    1. PSModulePath present (any value) -> pwsh
    2. SHELL contains "zsh" -> zsh, or contains "bash" -> bash
    3. BASH_VERSION present -> bash
    4. ZSH_VERSION present -> zsh
    5. bash

    Only PowerShell Core is recognized; Windows PowerShell 5.1 also sets
    PSModulePath and is reported as pwsh.

    Args:
        environ: Environment variables to inspect. Defaults to os.environ.

    Returns:
        The resolved ShellType. Never fails.
    """
    if environ is None:
        environ = os.environ

    if "PSModulePath" in environ:
        logger.debug("PSModulePath is set, resolving shell to pwsh")
        return ShellType.PWSH

    shell = environ.get("SHELL")
    if shell is not None:
        if "zsh" in shell:
            logger.debug("SHELL=%s, resolving shell to zsh", shell)
            return ShellType.ZSH
        elif "bash" in shell:
            logger.debug("SHELL=%s, resolving shell to bash", shell)
            return ShellType.BASH

    if "BASH_VERSION" in environ:
        return ShellType.BASH
    if "ZSH_VERSION" in environ:
        return ShellType.ZSH

    logger.debug("No shell signal in environment, defaulting to bash")
    return ShellType.BASH


def history_file_path(shell_type: ShellType, home: Optional[Path] = None) -> Path:
    """Locate the history file for a shell variant.

    Zsh and Bash paths are a join onto the home directory and perform no
    I/O. The pwsh path is discovered by running pwsh, so this call may block
    and may fail for that variant.

    Args:
        shell_type: Shell whose history file to locate.
        home: Home directory override. Defaults to the user's home.

    Returns:
        Absolute path of the history file.

    Raises:
        FailedToExecuteCommand: If pwsh cannot be run, exits non-zero or
            prints no path.
    """
    entry = _SHELL_TABLE[shell_type]
    if entry.history_file_name is not None:
        if home is None:
            home = home_dir()
        return Path(home) / entry.history_file_name

    return _query_pwsh_history_path(entry.executable)


def _query_pwsh_history_path(executable: str) -> Path:
    argv = [executable, "-Command", PWSH_HISTORY_PATH_QUERY]
    logger.debug("Querying PowerShell history path: %s", argv)
    try:
        proc = subprocess.run(argv, capture_output=True, check=False)
    except OSError as exc:
        raise FailedToExecuteCommand(str(exc)) from exc

    if proc.returncode != 0:
        raise FailedToExecuteCommand(
            f"{executable} exited with code {proc.returncode} while querying history path"
        )

    history_path = proc.stdout.decode("utf-8", errors="replace").strip()
    if not history_path:
        raise FailedToExecuteCommand(f"{executable} did not report a history path")

    return Path(history_path)
