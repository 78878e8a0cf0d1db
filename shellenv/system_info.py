"""Host system information reported alongside the active shell."""

import logging
import platform
from dataclasses import dataclass
from typing import Dict, Optional

from .errors import FailedToExtractSystemInfo

logger = logging.getLogger(__name__)

DEFAULT_OS_VERSION = "current"


@dataclass(frozen=True)
class SystemInfo:
    """Snapshot of the host: shell, OS name, OS version and CPU architecture."""
    shell: str
    os: str
    os_version: str
    arch: str

    def to_dict(self) -> Dict[str, str]:
        """Convert to JSON-serializable dictionary."""
        return {
            "shell": self.shell,
            "os": self.os,
            "os_version": self.os_version,
            "arch": self.arch,
        }


def _os_release() -> Dict[str, str]:
    try:
        return platform.freedesktop_os_release()
    except OSError:
        return {}


def get_os_name() -> str:
    """Get the host operating system name.

    On Linux this is the distribution name from os-release (e.g. "Ubuntu"),
    elsewhere the platform system name ("Darwin", "Windows").

    Raises:
        FailedToExtractSystemInfo: If no name can be determined.
    """
    system = platform.system()
    name: Optional[str] = None
    if system == "Linux":
        name = _os_release().get("NAME")
    name = name or system
    if not name:
        raise FailedToExtractSystemInfo("Failed to get system name")
    return name


def get_os_version() -> str:
    """Get the host OS version, or "current" when it is not available."""
    system = platform.system()
    version = ""
    try:
        if system == "Linux":
            version = _os_release().get("VERSION_ID", "")
        elif system == "Darwin":
            version = platform.mac_ver()[0]
        elif system == "Windows":
            version = platform.version()
        else:
            version = platform.release()
    except (OSError, ValueError) as exc:
        logger.debug("OS version lookup failed: %s", exc)
        version = ""

    return version or DEFAULT_OS_VERSION


def get_cpu_arch() -> str:
    """Get the normalized CPU architecture name.

    Raises:
        FailedToExtractSystemInfo: If the architecture is unknown.
    """
    machine = platform.machine()
    if not machine:
        raise FailedToExtractSystemInfo("Failed to get CPU architecture")

    machine_lower = machine.lower()
    if machine_lower in ("x86_64", "amd64"):
        return "x86_64"
    elif machine_lower in ("arm64", "aarch64"):
        return "arm64"
    elif machine_lower in ("i386", "i686", "x86"):
        return "x86"
    return machine_lower
