"""Errors that end a bootstrap run.

All derive from click.ClickException so the CLI prints ``Error: <message>``
and exits with status 1 without extra handling.
"""

import click


class BootstrapError(click.ClickException):
    """Base class for failures after argument parsing."""


class LogFilterError(BootstrapError):
    """The log filter string could not be parsed."""


def _describe(program, args, cwd):
    command = " ".join([program] + [str(a) for a in args])
    where = cwd if cwd is not None else "<current directory>"
    return f"`{command}` in {where}"


class CommandFailedError(BootstrapError):
    """An external command exited with a non-zero status."""

    def __init__(self, program, args, cwd, returncode):
        self.program = program
        self.args_list = list(args)
        self.cwd = cwd
        self.returncode = returncode
        super().__init__(
            f"command failed: {_describe(program, self.args_list, cwd)} "
            f"exited with status {returncode}"
        )


class LaunchFailedError(BootstrapError):
    """An external command could not be started at all."""

    def __init__(self, program, args, cwd, os_error):
        self.program = program
        self.args_list = list(args)
        self.cwd = cwd
        self.os_error = os_error
        super().__init__(
            f"launch failed: {_describe(program, self.args_list, cwd)}: {os_error}"
        )
