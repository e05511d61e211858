"""cwd-exec package.

Runs an external command through the system shell inside a validated working
directory and returns its captured output:
- Validates that the executable is on PATH and the directory exists
- Spawns ``cmd /C`` on Windows and ``sh -c`` elsewhere
- Resolves a default working directory from the current one

This package is intentionally small.
"""

from .errors import CommandNotFound, ExecutionError, InvalidWorkingDirectory, SpawnFailed
from .shell_runner import CommandOutcome, ShellRunner, execute, validate
from .shells import POSIX_SHELL, WINDOWS_SHELL, ShellStrategy, select_shell
from .workdir import resolve_working_directory

__all__ = [
    "CommandNotFound",
    "CommandOutcome",
    "ExecutionError",
    "InvalidWorkingDirectory",
    "POSIX_SHELL",
    "ShellRunner",
    "ShellStrategy",
    "SpawnFailed",
    "WINDOWS_SHELL",
    "execute",
    "resolve_working_directory",
    "select_shell",
    "validate",
]

__version__ = "0.1.0"
