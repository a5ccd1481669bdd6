"""Options dataclass for the bootstrap command."""

from dataclasses import dataclass

import click

from cargo_bootstrap.log_context import Verbosity


@dataclass(frozen=True)
class BootstrapOpts:
    """All options for the bootstrap command."""

    path: str
    bin: bool = False
    lib: bool = False
    name: str | None = None
    verbosity: Verbosity = Verbosity.INFO

    @property
    def builds(self):
        """Binary templates (explicit or cargo's default) get a build commit."""
        return not self.lib

    def validate(self):
        """Raise click.UsageError if --bin and --lib are both set."""
        if self.bin and self.lib:
            raise click.UsageError("--bin cannot be combined with --lib")
        return self
