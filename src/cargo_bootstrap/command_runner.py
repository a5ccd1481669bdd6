"""CommandRunner: runs external programs and turns failures into errors.

Launching is delegated to a launcher so tests can swap in a recording
fake instead of spawning real processes.
"""

import subprocess
from dataclasses import dataclass
from typing import List, Optional

from cargo_bootstrap.errors import CommandFailedError, LaunchFailedError
from cargo_bootstrap.log_context import TRACE


@dataclass
class LaunchResult:
    """Exit status plus any captured output (empty when inherited)."""
    returncode: int
    stdout: str = ""
    stderr: str = ""


class SubprocessLauncher:
    """Launches programs with subprocess.run and waits for them.

    With capture_output=False the child inherits stdout/stderr so the
    user sees cargo and git output as it happens.
    """

    def __init__(self, capture_output: bool = False):
        self.capture_output = capture_output

    def launch(self, cmd: List[str], cwd: Optional[str] = None) -> LaunchResult:
        if self.capture_output:
            result = subprocess.run(cmd, cwd=cwd, capture_output=True, text=True)
            return LaunchResult(result.returncode, result.stdout, result.stderr)
        result = subprocess.run(cmd, cwd=cwd)
        return LaunchResult(returncode=result.returncode)


class CommandRunner:
    """Runs one external command at a time, raising on any failure."""

    def __init__(self, log_context, launcher=None):
        self._launcher = launcher or SubprocessLauncher()
        self._logger = log_context.get_logger("command_runner")

    def run(self, program: str, args, cwd: Optional[str] = None) -> LaunchResult:
        args = [str(a) for a in args]
        cmd = [program] + args
        if cwd is None:
            self._logger.info("Running: %s", " ".join(cmd))
        else:
            self._logger.info("Running: %s (in %s)", " ".join(cmd), cwd)

        try:
            result = self._launcher.launch(cmd, cwd=cwd)
        except OSError as e:
            raise LaunchFailedError(program, args, cwd, e) from e

        self._logger.log(TRACE, "%s exited with status %d", program, result.returncode)
        if result.returncode != 0:
            raise CommandFailedError(program, args, cwd, result.returncode)
        return result
