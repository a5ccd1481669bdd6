"""CommandBuilder: builds the cargo and git argument lists."""

from typing import List

SCAFFOLD_LABEL = ["bootstrap:", "cargo"]
ROOT_COMMIT_MESSAGE = "bootstrap: root commit"
BUILD_COMMIT_MESSAGE = "bootstrap: initial build"


class CommandBuilder:
    """Builds argument lists; the program name is supplied by the caller."""

    def scaffold_args(self, opts) -> List[str]:
        args = ["new"]
        if opts.bin:
            args.append("--bin")
        if opts.lib:
            args.append("--lib")
        if opts.name is not None:
            args.extend(["--name", opts.name])
        args.append(str(opts.path))
        return args

    def scaffold_commit_message(self, scaffold_args: List[str]) -> str:
        """Record the exact `cargo new` invocation in the commit message."""
        return " ".join(SCAFFOLD_LABEL + list(scaffold_args))

    def root_commit_args(self) -> List[str]:
        return ["commit", "--allow-empty", "--message", ROOT_COMMIT_MESSAGE]

    def stage_all_args(self) -> List[str]:
        return ["add", "."]

    def commit_args(self, message: str) -> List[str]:
        return ["commit", "--message", message]

    def build_args(self) -> List[str]:
        return ["build"]
