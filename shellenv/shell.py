"""Shell facade: system info plus history append and read.

History appends are delegated to the shell binary itself rather than
written from Python, so each shell's on-disk history format is produced by
the shell that owns it.
"""

import logging
import shlex
import subprocess
from pathlib import Path
from typing import Iterator, List, Mapping, Optional

from .config import ShellEnvConfig
from .errors import (
    FailedToAddCommandToHistory,
    FailedToExecuteCommand,
    FailedToReadShellHistory,
)
from .path_utils import to_shell_path
from .shell_type import ShellType, history_file_path, resolve_shell_type
from .system_info import SystemInfo, get_cpu_arch, get_os_name, get_os_version

logger = logging.getLogger(__name__)


class Shell:
    """Operations against the user's shell environment.

    The shell type is resolved again on every call; nothing is cached
    between calls.

    Args:
        environ: Environment snapshot for shell resolution. Defaults to
            the live os.environ.
        home: Home directory for zsh/bash history files. Defaults to the
            user's home.
        config: Optional shell and history file overrides.
    """

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        home: Optional[Path] = None,
        config: Optional[ShellEnvConfig] = None,
    ):
        self._environ = environ
        self._home = home
        self._config = config or ShellEnvConfig()

    def current_shell_type(self) -> ShellType:
        """Configured shell override if any, otherwise the detected shell."""
        if self._config.shell is not None:
            return self._config.shell
        return resolve_shell_type(self._environ)

    def extract_system_info(self) -> SystemInfo:
        """Collect OS name, OS version, CPU architecture and shell name.

        Raises:
            FailedToExtractSystemInfo: If the OS name or architecture is
                unavailable. A missing OS version falls back to "current".
        """
        os_name = get_os_name()
        os_version = get_os_version()
        arch = get_cpu_arch()
        shell_type = self.current_shell_type()
        return SystemInfo(
            shell=str(shell_type),
            os=os_name,
            os_version=os_version,
            arch=arch,
        )

    def add_command_to_history(self, command: str) -> None:
        """Append a command to the active shell's history file.

        Runs ``<shell> -c 'echo "<command>" >> <history>'`` for zsh/bash and
        ``pwsh -Command 'Add-Content -Path "<history>" -Value "<command>"'``
        for pwsh, and waits for it to exit. The command text is embedded
        verbatim; the history path is shell-quoted.

        Raises:
            FailedToExecuteCommand: If the shell could not be spawned or the
                pwsh history path could not be determined.
            FailedToAddCommandToHistory: If the shell exited non-zero.
        """
        shell_type = self.current_shell_type()
        history_path = self._config.history_file
        if history_path is None:
            history_path = history_file_path(shell_type, home=self._home)

        if shell_type == ShellType.PWSH:
            argv = [
                shell_type.executable_name,
                "-Command",
                f'Add-Content -Path "{history_path}" -Value "{command}"',
            ]
        else:
            target = shlex.quote(to_shell_path(history_path, self._environ))
            argv = [
                shell_type.executable_name,
                "-c",
                f'echo "{command}" >> {target}',
            ]

        logger.debug("Appending to history via: %s", argv)
        try:
            proc = subprocess.run(argv, check=False)
        except OSError as exc:
            raise FailedToExecuteCommand(str(exc)) from exc

        if proc.returncode != 0:
            raise FailedToAddCommandToHistory(proc.returncode)

        logger.info("Command added to %s history at %s", shell_type, history_path)

    def iter_shell_history(self, path: Path) -> Iterator[str]:
        """Yield history lines from path in file order.

        The file is scanned as bytes split on newlines; bytes that are not
        valid UTF-8 are replaced with U+FFFD instead of failing the read.
        Line terminators are stripped and an empty file yields nothing.

        Raises:
            FailedToReadShellHistory: If the file cannot be opened or read.
        """
        try:
            with open(path, "rb") as history_file:
                for raw in history_file:
                    if raw.endswith(b"\n"):
                        raw = raw[:-1]
                        if raw.endswith(b"\r"):
                            raw = raw[:-1]
                    try:
                        line = raw.decode("utf-8")
                    except UnicodeDecodeError:
                        logger.warning("Replaced invalid bytes in history line of %s", path)
                        line = raw.decode("utf-8", errors="replace")
                    yield line
        except OSError as exc:
            raise FailedToReadShellHistory(exc) from exc

    def get_shell_history(self, path: Path) -> List[str]:
        """Read all history lines from path. See iter_shell_history()."""
        return list(self.iter_shell_history(path))

    def shell_history_path(self, shell_type: Optional[ShellType] = None) -> Path:
        """Resolve a history file path without reading or writing it.

        Args:
            shell_type: Variant to locate. When omitted, the configured
                history file is used if set, otherwise the active shell's.

        Raises:
            FailedToExecuteCommand: If the pwsh path query fails.
        """
        if shell_type is None:
            if self._config.history_file is not None:
                return self._config.history_file
            shell_type = self.current_shell_type()
        return history_file_path(shell_type, home=self._home)
