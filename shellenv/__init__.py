# shellenv package
#
# Shell detection and history access for tools that need to read the user's
# command history or add suggested commands to it:
#
#   from shellenv import Shell, ShellType
#
#   shell = Shell()
#   shell.add_command_to_history("ls -la")
#   lines = shell.get_shell_history(shell.shell_history_path())
#
# Lazy loading: imports are deferred via __getattr__ so that importing the
# package does not import submodules until a name is first used.

__version__ = "0.1.0"

# Mapping from public name -> (module_path, attribute_name)
_LAZY_IMPORTS = {
    # Facade
    "Shell": (".shell", "Shell"),
    # Shell variants
    "ShellType": (".shell_type", "ShellType"),
    "resolve_shell_type": (".shell_type", "resolve_shell_type"),
    "history_file_path": (".shell_type", "history_file_path"),
    # System info
    "SystemInfo": (".system_info", "SystemInfo"),
    # Configuration
    "ShellEnvConfig": (".config", "ShellEnvConfig"),
    "load_config": (".config", "load_config"),
    # Errors
    "ShellError": (".errors", "ShellError"),
    "UnsupportedShellType": (".errors", "UnsupportedShellType"),
    "FailedToExecuteCommand": (".errors", "FailedToExecuteCommand"),
    "FailedToAddCommandToHistory": (".errors", "FailedToAddCommandToHistory"),
    "FailedToReadShellHistory": (".errors", "FailedToReadShellHistory"),
    "FailedToExtractSystemInfo": (".errors", "FailedToExtractSystemInfo"),
}

__all__ = list(_LAZY_IMPORTS)


def __getattr__(name):
    if name in _LAZY_IMPORTS:
        import importlib
        module_path, attr_name = _LAZY_IMPORTS[name]
        module = importlib.import_module(module_path, __name__)
        value = getattr(module, attr_name)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
