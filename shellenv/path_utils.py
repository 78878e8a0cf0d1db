"""Path helpers for handing history file paths between Python and shells.

History paths are computed in Python but consumed by shells. Under MSYS2 or
Git Bash on Windows these disagree on what a path looks like:

    Python:   C:\\Users\\foo\\.bash_history
    bash -c:  /c/Users/foo/.bash_history

This module provides:
- MSYS2 environment detection
- Drive letter conversion: C:/foo <-> /c/foo
- The user's home directory as a Path
- Rendering a path in the form the target shell expects

Reference: https://www.msys2.org/docs/filesystem-paths/
"""

import functools
import os
import re
import sys
from pathlib import Path
from typing import Mapping, Optional


_MSYSTEM_VALUES = frozenset(
    ('MINGW64', 'MINGW32', 'MSYS', 'UCRT64', 'CLANG64', 'CLANGARM64')
)


def _has_msys2_markers(environ: Mapping[str, str]) -> bool:
    """True when native Windows Python sees MSYS2 or Git Bash variables.

    Markers are MSYSTEM naming an MSYS2 subsystem, or TERM_PROGRAM=mintty.
    MSYS2's own Python already uses Unix paths, so nothing counts off win32.
    """
    if sys.platform != 'win32':
        return False
    if environ.get('MSYSTEM', '') in _MSYSTEM_VALUES:
        return True
    return environ.get('TERM_PROGRAM') == 'mintty'


@functools.lru_cache(maxsize=1)
def is_msys2_environment() -> bool:
    """MSYS2 detection against the live process environment, cached."""
    return _has_msys2_markers(os.environ)


def _uses_msys2_paths(environ: Optional[Mapping[str, str]]) -> bool:
    # Snapshots are checked directly; only the live environment is cached.
    if environ is None:
        return is_msys2_environment()
    return _has_msys2_markers(environ)


# /c/... or /C/..., drive letter followed by / or end of string so that
# /config or /cache do not match
_MSYS2_DRIVE_RE = re.compile(r'^/([a-zA-Z])(?:/|$)')

# C:/ or C:\
_WINDOWS_DRIVE_RE = re.compile(r'^([a-zA-Z]):[\\/]')


def msys2_to_windows_path(path: str) -> str:
    """Convert /c/Users/foo to C:/Users/foo so Python can open it.

    Paths without a single-letter drive prefix are returned unchanged.
    """
    if not path:
        return path

    m = _MSYS2_DRIVE_RE.match(path)
    if m:
        drive = m.group(1).upper()
        rest = path[2:]
        return f"{drive}:{rest}" if rest else f"{drive}:/"

    return path


def windows_to_msys2_path(path: str) -> str:
    """Convert C:\\Users\\foo to /c/Users/foo.

    Backslashes are always replaced with forward slashes; the drive letter
    is only rewritten when present.
    """
    if not path:
        return path

    path = path.replace('\\', '/')

    m = _WINDOWS_DRIVE_RE.match(path)
    if m:
        drive = m.group(1).lower()
        rest = path[2:]
        return f"/{drive}{rest}"

    return path


def home_dir() -> Path:
    """Return the current user's home directory."""
    return Path.home()


def to_shell_path(path: Path, environ: Optional[Mapping[str, str]] = None) -> str:
    """Render a path for embedding in a POSIX shell script.

    Under MSYS2 the Windows path is converted to its /c/... mount form;
    elsewhere the path is returned as-is. environ is the snapshot to check
    for MSYS2 markers, defaulting to the live environment.
    """
    text = str(path)
    if _uses_msys2_paths(environ):
        return windows_to_msys2_path(text)
    return text


def from_user_path(text: str, environ: Optional[Mapping[str, str]] = None) -> Path:
    """Turn a user-supplied path string into a Path Python can open.

    Expands ``~`` and, under MSYS2, maps /c/... back to C:/...
    """
    if _uses_msys2_paths(environ):
        text = msys2_to_windows_path(text)
    return Path(os.path.expanduser(text))
