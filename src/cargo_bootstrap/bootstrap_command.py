"""BootstrapCommand encapsulates the bootstrap sequence.

Steps run in a fixed order and the first failure aborts the rest:

    cargo new ...            scaffold the project
    git commit --allow-empty root commit
    git add . / git commit   record the scaffold and the invocation used
    cargo build + commit     binary templates only
"""

import os

from git.exc import GitError

from cargo_bootstrap.command_builder import BUILD_COMMIT_MESSAGE, CommandBuilder
from cargo_bootstrap.git_repository import GitRepository

CARGO_ENV_VAR = "CARGO"
DEFAULT_CARGO = "cargo"
GIT = "git"


def cargo_program(environ=None):
    """Return the cargo executable, honouring $CARGO."""
    environ = os.environ if environ is None else environ
    return environ.get(CARGO_ENV_VAR) or DEFAULT_CARGO


class BootstrapCommand:
    """Scaffolds a Cargo project and records it in git history."""

    def __init__(self, opts, runner, log_context, cargo=DEFAULT_CARGO,
                 command_builder=None, open_repository=GitRepository.open):
        self.opts = opts
        self.runner = runner
        self.cargo = cargo
        self._builder = command_builder or CommandBuilder()
        self._open_repository = open_repository
        self._logger = log_context.get_logger("bootstrap")

    @property
    def target_dir(self):
        return str(self.opts.path)

    def execute(self):
        scaffold_args = self._builder.scaffold_args(self.opts)
        self.runner.run(self.cargo, scaffold_args)

        self._git(self._builder.root_commit_args())
        self._report_commit()

        self._commit_all(self._builder.scaffold_commit_message(scaffold_args))

        if not self.opts.builds:
            self._logger.debug("Library template: skipping initial build")
            return

        self.runner.run(self.cargo, self._builder.build_args(), cwd=self.target_dir)
        self._commit_all(BUILD_COMMIT_MESSAGE)

    def _git(self, args):
        self.runner.run(GIT, args, cwd=self.target_dir)

    def _commit_all(self, message):
        self._git(self._builder.stage_all_args())
        self._git(self._builder.commit_args(message))
        self._report_commit()

    def _report_commit(self):
        # Reporting only; a failure here must not stop the sequence.
        try:
            repo = self._open_repository(self.target_dir)
            sha, message = repo.head_sha, repo.head_message
        except (GitError, ValueError) as e:
            self._logger.warning("Could not read HEAD in %s: %s", self.target_dir, e)
            return
        self._logger.info("Committed %s: %s", sha[:7], message)
