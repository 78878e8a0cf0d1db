"""Optional shell-override settings.

Settings come from environment variables, optionally seeded from a .env
file:

    SHELLENV_SHELL=zsh                      # force a shell variant
    SHELLENV_HISTORY_FILE=~/.my_history     # read/write this history file
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from .path_utils import from_user_path
from .shell_type import ShellType

logger = logging.getLogger(__name__)

SHELL_ENV_VAR = "SHELLENV_SHELL"
HISTORY_FILE_ENV_VAR = "SHELLENV_HISTORY_FILE"


@dataclass
class ShellEnvConfig:
    """User overrides for shell detection and history location.

    Attributes:
        shell: Shell variant to use instead of the detected one.
        history_file: History file to use instead of the shell's own.
    """
    shell: Optional[ShellType] = None
    history_file: Optional[Path] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ShellEnvConfig":
        """Build settings from environment variables.

        Blank values are treated as unset.

        Raises:
            UnsupportedShellType: If SHELLENV_SHELL names an unknown shell.
        """
        if environ is None:
            environ = os.environ

        shell = None
        shell_name = environ.get(SHELL_ENV_VAR, "").strip()
        if shell_name:
            shell = ShellType.from_name(shell_name)

        history_file = None
        history_text = environ.get(HISTORY_FILE_ENV_VAR, "").strip()
        if history_text:
            history_file = from_user_path(history_text)

        return cls(shell=shell, history_file=history_file)


def load_config(
    env_file: str = ".env",
    environ: Optional[Mapping[str, str]] = None
) -> ShellEnvConfig:
    """Load settings, reading env_file into os.environ first.

    The .env file is only consulted when reading the live environment;
    variables already set take precedence over the file.

    Args:
        env_file: Path to a .env file. Missing files are ignored.
        environ: Environment snapshot to read instead of os.environ.
    """
    if environ is None:
        if load_dotenv(env_file):
            logger.debug("Loaded settings from %s", env_file)
    return ShellEnvConfig.from_env(environ)
