"""Click command for cargo-bootstrap."""

import os

import click

from cargo_bootstrap.bootstrap_command import BootstrapCommand, cargo_program
from cargo_bootstrap.bootstrap_opts import BootstrapOpts
from cargo_bootstrap.command_runner import CommandRunner
from cargo_bootstrap.git_repository import GitRepository
from cargo_bootstrap.log_context import LogContext, Verbosity


@click.command("cargo-bootstrap")
@click.version_option(package_name="cargo-bootstrap")
@click.argument("path", type=click.Path(file_okay=False))
@click.option("--bin", "bin_", is_flag=True,
              help="Use a binary (application) template")
@click.option("--lib", is_flag=True,
              help="Use a library template (skips the initial build)")
@click.option("--name", metavar="NAME",
              help="Set the package name (defaults to the directory name)")
@click.option("-v", "--verbose", count=True,
              help="More output; repeat for debug and trace")
@click.option("-q", "--quiet", count=True,
              help="Less output; repeat for errors only or silence")
@click.pass_context
def main(ctx, path, bin_, lib, name, verbose, quiet):
    """Create a new Cargo package at PATH and record it in git history.

    Runs `cargo new`, makes an empty root commit, commits the scaffold with
    the exact `cargo new` invocation as its message and, unless --lib is
    given, builds once and commits the result.
    """
    opts = BootstrapOpts(
        path=path, bin=bin_, lib=lib, name=name,
        verbosity=Verbosity.from_counts(verbose, quiet),
    ).validate()

    log_context = LogContext.from_environment(opts.verbosity, os.environ).install()
    log_context.logger.debug("Parsed options: %r", opts)

    collaborators = ctx.obj or {}
    runner = CommandRunner(log_context, launcher=collaborators.get("launcher"))
    command = BootstrapCommand(
        opts, runner, log_context,
        cargo=cargo_program(),
        open_repository=collaborators.get("open_repository", GitRepository.open),
    )
    command.execute()
