"""Runs the external protoc compiler and captures its output"""
import signal
import subprocess
from typing import List, Optional

from protoc_gui.infrastructure.interfaces import ICommandRunner

PROTOC_EXECUTABLE = "protoc"


class ExecutionResult:
    """Outcome of one compiler invocation."""

    def __init__(self, exit_error: Optional[str] = None, stdout: str = "", stderr: str = ""):
        self.exit_error = exit_error
        self.stdout = stdout
        self.stderr = stderr

    @property
    def ok(self) -> bool:
        return self.exit_error is None

    def __repr__(self) -> str:
        return (f"ExecutionResult(exit_error={self.exit_error!r}, "
                f"stdout={self.stdout!r}, stderr={self.stderr!r})")


def describe_returncode(returncode: int) -> Optional[str]:
    """Error text for a finished process, None on a clean exit."""
    if returncode == 0:
        return None
    if returncode < 0:
        try:
            name = signal.Signals(-returncode).name
        except ValueError:
            name = str(-returncode)
        return f"signal: {name}"
    return f"exit status {returncode}"


class ProcessRunner(ICommandRunner):
    """
    Blocking single-attempt runner.
    stdout and stderr are buffered separately and fully in memory. There
    is no timeout: a hung compiler blocks the calling thread.
    """

    def run(self, executable: str, args: List[str]) -> ExecutionResult:
        try:
            completed = subprocess.run(
                [executable] + list(args),
                capture_output=True,
                text=True,
                errors="replace",
            )
        except OSError as e:
            return ExecutionResult(exit_error=str(e))

        return ExecutionResult(
            exit_error=describe_returncode(completed.returncode),
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
