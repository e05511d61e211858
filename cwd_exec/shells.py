from __future__ import annotations

import platform
from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class ShellStrategy:
    name: str
    program: str
    flag: str

    def argv(self, command: str) -> List[str]:
        return [self.program, self.flag, command]


WINDOWS_SHELL = ShellStrategy(name="windows", program="cmd", flag="/C")
POSIX_SHELL = ShellStrategy(name="posix", program="sh", flag="-c")


def select_shell(system: Optional[str] = None) -> ShellStrategy:
    """Pick the shell that receives the command string.

    ``system`` is a ``platform.system()`` value and defaults to the host's.
    """
    target = (system if system is not None else platform.system()).lower()
    if target == "windows":
        return WINDOWS_SHELL
    return POSIX_SHELL
