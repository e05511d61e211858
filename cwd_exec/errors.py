from __future__ import annotations

from typing import Optional, Union


class ExecutionError(Exception):
    """Raised when a command could not be started.

    A command that starts and exits nonzero is not an error; see
    ``CommandOutcome.exit_code``.
    """

    def __init__(self, message: str, *, command: str):
        super().__init__(message)
        self.command = command


class CommandNotFound(ExecutionError):
    def __init__(self, command: str, executable: str):
        super().__init__(f"Could not find specified command: {command}", command=command)
        self.executable = executable


class InvalidWorkingDirectory(ExecutionError):
    DOES_NOT_EXIST = "path does not exist"
    NOT_A_DIRECTORY = "path is not a directory"

    def __init__(self, command: str, path: str, reason: str):
        super().__init__(f"Invalid working directory {path!r}: {reason}", command=command)
        self.path = path
        self.reason = reason


class SpawnFailed(ExecutionError):
    # os_error is the OSError from process creation, or the ValueError raised
    # for arguments the OS cannot accept (an embedded NUL byte).
    def __init__(self, command: str, os_error: Union[OSError, ValueError]):
        super().__init__(f"Failed to spawn {command!r}: {os_error}", command=command)
        self.os_error = os_error

    @property
    def errno(self) -> Optional[int]:
        return getattr(self.os_error, "errno", None)
