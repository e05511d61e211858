from __future__ import annotations

import logging
import os
import shutil
import subprocess
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from .errors import CommandNotFound, InvalidWorkingDirectory, SpawnFailed
from .shells import select_shell
from .workdir import resolve_working_directory

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


@dataclass(frozen=True)
class CommandOutcome:
    command: str
    cwd: str
    exit_code: int
    stdout: bytes
    stderr: bytes
    duration_ms: int

    @property
    def success(self) -> bool:
        return self.exit_code == 0

    @property
    def stdout_text(self) -> str:
        return self.stdout.decode("utf-8", errors="replace")

    @property
    def stderr_text(self) -> str:
        return self.stderr.decode("utf-8", errors="replace")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "command": self.command,
            "cwd": self.cwd,
            "success": self.success,
            "exit_code": self.exit_code,
            "stdout": self.stdout_text,
            "stderr": self.stderr_text,
            "duration_ms": self.duration_ms,
        }


def executable_name(command: str) -> str:
    return command.split(" ", 1)[0]


def validate(command: str, cwd: PathLike) -> str:
    """Check that ``command`` can run in ``cwd`` and return the executable's path.

    The executable is the text before the first space. Raises
    ``CommandNotFound`` or ``InvalidWorkingDirectory``.
    """
    name = executable_name(command)
    resolved = shutil.which(name) if name else None
    if resolved is None:
        raise CommandNotFound(command, name)

    path = os.fspath(cwd)
    if not os.path.exists(path):
        raise InvalidWorkingDirectory(command, path, InvalidWorkingDirectory.DOES_NOT_EXIST)
    if not os.path.isdir(path):
        raise InvalidWorkingDirectory(command, path, InvalidWorkingDirectory.NOT_A_DIRECTORY)

    logger.debug("validated %r: executable=%s cwd=%s", command, resolved, path)
    return resolved


def execute(command: str, cwd: PathLike) -> CommandOutcome:
    """Run ``command`` through the host shell inside ``cwd`` and capture its output.

    Nothing is spawned unless the executable is on the search path and ``cwd``
    is an existing directory. The command string reaches the shell verbatim,
    so quoting and the safety of its contents are the caller's concern.

    A nonzero exit of the command is reported in the returned outcome, not
    raised.
    """
    validate(command, cwd)
    path = os.fspath(cwd)
    argv = select_shell().argv(command)

    start_time = time.time()
    try:
        completed = subprocess.run(
            argv,
            cwd=path,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except (OSError, ValueError) as exc:
        raise SpawnFailed(command, exc) from exc
    duration_ms = int((time.time() - start_time) * 1000)

    logger.debug("%s exited with %d after %d ms", argv, completed.returncode, duration_ms)
    return CommandOutcome(
        command=command,
        cwd=path,
        exit_code=completed.returncode,
        stdout=completed.stdout,
        stderr=completed.stderr,
        duration_ms=duration_ms,
    )


class ShellRunner:
    """Run commands against a default working directory.

    The default is resolved once, at construction, and may be overridden per
    call.
    """

    def __init__(self, cwd: Optional[PathLike] = None):
        self.default_cwd = resolve_working_directory(cwd)

    def run(self, command: str, *, cwd: Optional[PathLike] = None) -> CommandOutcome:
        effective_cwd = cwd if cwd is not None else self.default_cwd
        return execute(command, effective_cwd)
