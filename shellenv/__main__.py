#!/usr/bin/env python3
"""shellenv - inspect the user's shell and its command history.

Usage:
    # Show shell, OS, OS version and architecture
    python -m shellenv sysinfo

    # Where the active shell keeps its history
    python -m shellenv history path

    # Last 20 history entries
    python -m shellenv history show --limit 20

    # Append a command to the active shell's history
    python -m shellenv history add "git status"
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from .config import load_config
from .errors import ShellError
from .path_utils import from_user_path
from .shell import Shell
from .shell_type import ShellType

logger = logging.getLogger(__name__)


def _cmd_sysinfo(shell: Shell, args: argparse.Namespace, console: Console) -> None:
    info = shell.extract_system_info()
    if args.json:
        console.print_json(json.dumps(info.to_dict()))
        return

    table = Table(show_header=False, box=None)
    table.add_column("Field", style="bold blue")
    table.add_column("Value", style="bold")
    for field, value in info.to_dict().items():
        table.add_row(field, value)
    console.print(table)


def _cmd_history_path(shell: Shell, args: argparse.Namespace, console: Console) -> None:
    shell_type = ShellType.from_name(args.shell) if args.shell else None
    console.print(str(shell.shell_history_path(shell_type)), markup=False, highlight=False, soft_wrap=True)


def _cmd_history_show(shell: Shell, args: argparse.Namespace, console: Console) -> None:
    path = from_user_path(args.path) if args.path else shell.shell_history_path()
    lines = shell.get_shell_history(path)
    if args.limit is not None:
        lines = lines[-args.limit:] if args.limit > 0 else []
    for line in lines:
        console.print(line, markup=False, highlight=False, soft_wrap=True)


def _cmd_history_add(shell: Shell, args: argparse.Namespace, console: Console) -> None:
    shell.add_command_to_history(args.command)
    console.print("[bold green]Command added to shell history[/bold green]")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shellenv",
        description="Inspect the active shell and read or extend its command history",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to .env file with SHELLENV_* settings (default: .env)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose logging",
    )

    subparsers = parser.add_subparsers(dest="subcommand", required=True)

    sysinfo = subparsers.add_parser("sysinfo", help="Show shell and host system information")
    sysinfo.add_argument("--json", action="store_true", help="Print as JSON")
    sysinfo.set_defaults(handler=_cmd_sysinfo)

    history = subparsers.add_parser("history", help="Read or extend the shell history")
    history_sub = history.add_subparsers(dest="history_command", required=True)

    path = history_sub.add_parser("path", help="Print the history file path")
    path.add_argument(
        "--shell",
        metavar="NAME",
        help="Shell to locate instead of the active one (zsh, bash, pwsh)",
    )
    path.set_defaults(handler=_cmd_history_path)

    show = history_sub.add_parser("show", help="Print history entries")
    show.add_argument("--path", metavar="PATH", help="History file to read")
    show.add_argument("--limit", "-n", type=int, metavar="N", help="Only the last N entries")
    show.set_defaults(handler=_cmd_history_show)

    add = history_sub.add_parser("add", help="Append a command to the shell history")
    add.add_argument("command", help="Command text to append")
    add.set_defaults(handler=_cmd_history_add)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    console = Console()
    err_console = Console(stderr=True)

    try:
        config = load_config(args.env_file)
        shell = Shell(config=config)
        args.handler(shell, args, console)
    except ShellError as exc:
        logger.debug("Command failed", exc_info=True)
        err_console.print(str(exc), style="bold red", markup=False, highlight=False, soft_wrap=True)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
