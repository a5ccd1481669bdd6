"""RecordingLauncher: test double for SubprocessLauncher.

Separated into its own module so tests can import it unambiguously
regardless of pytest's conftest resolution order.
"""

from cargo_bootstrap.command_runner import LaunchResult


class RecordingLauncher:
    """Records each launch and returns scripted exit codes.

    Usage:
        launcher = RecordingLauncher()
        launcher.fail_on("git", "commit", returncode=128)
        launcher.launch(["cargo", "new", "foo"], cwd=None)
        assert launcher.calls == [(["cargo", "new", "foo"], None)]
    """

    def __init__(self):
        self.calls = []
        self._failures = []
        self._launch_errors = []

    def fail_on(self, *prefix, returncode=1):
        """Return *returncode* for the first command starting with *prefix*."""
        self._failures.append((list(prefix), returncode))

    def raise_on(self, *prefix, error=None):
        """Raise an OSError for the first command starting with *prefix*."""
        self._launch_errors.append(
            (list(prefix), error or FileNotFoundError(2, "No such file or directory", prefix[0]))
        )

    @property
    def commands(self):
        return [cmd for cmd, _ in self.calls]

    def launch(self, cmd, cwd=None):
        self.calls.append((list(cmd), cwd))
        for i, (prefix, error) in enumerate(self._launch_errors):
            if cmd[:len(prefix)] == prefix:
                del self._launch_errors[i]
                raise error
        for i, (prefix, returncode) in enumerate(self._failures):
            if cmd[:len(prefix)] == prefix:
                del self._failures[i]
                return LaunchResult(returncode=returncode)
        return LaunchResult(returncode=0)
