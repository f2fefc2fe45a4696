"""ShellRunner: runs shell command lines and captures their output."""

import subprocess
import sys
from dataclasses import dataclass
from typing import Callable, List, Optional, TextIO

from tskata.errors import SubprocessFailure

SPAWN_FAILED = -1


@dataclass
class CommandResult:
    """Outcome of a single shell command."""

    command: str
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self):
        return self.returncode == 0

    @property
    def output(self):
        """Standard output when the command wrote any, otherwise standard error."""
        return self.stdout if self.stdout.strip() else self.stderr

    def check(self):
        """Return the captured output, raising SubprocessFailure on a non-zero exit."""
        if not self.ok:
            raise SubprocessFailure(self.command, self.returncode, self.output)
        return self.output


class ShellRunner:
    """Runs commands in the current working directory and waits for them.

    Args:
        process_runner: Callable with the signature of subprocess.run.
        output: Stream that receives fallback warnings.
    """

    def __init__(self, process_runner: Optional[Callable] = None, output: Optional[TextIO] = None):
        self._process_runner = process_runner or subprocess.run
        self._output = output or sys.stderr
        self.attempts: List[str] = []

    def run(self, command: str) -> CommandResult:
        """Run ``command`` through the shell and return its result.

        A non-zero exit is reported in the result rather than raised; callers
        decide whether it is fatal.
        """
        self.attempts.append(command)
        try:
            completed = self._process_runner(
                command, shell=True, capture_output=True, text=True,
            )
        except OSError as exc:
            return CommandResult(command, SPAWN_FAILED, stderr=str(exc))
        return CommandResult(
            command,
            completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )

    def run_with_fallback(self, primary: str, fallback: str) -> CommandResult:
        """Run ``primary``; if it fails, warn and return the result of ``fallback``."""
        result = self.run(primary)
        if result.ok:
            return result
        print(
            f"Warning: '{primary}' failed (exit {result.returncode}), trying '{fallback}'",
            file=self._output,
        )
        return self.run(fallback)
