"""GitRepository: read-only view of the bootstrapped repository's HEAD.

Wraps a GitPython Repo so BootstrapCommand can report each commit it
makes; tests inject FakeGitRepository instead.
"""

from git import Repo


class GitRepository:
    """Wraps a GitPython Repo.

    Args:
        repo: A GitPython Repo instance.
    """

    def __init__(self, repo):
        self._repo = repo

    @classmethod
    def open(cls, path):
        """Open the repository containing *path*, which may be a parent's."""
        return cls(Repo(path, search_parent_directories=True))

    @property
    def head_sha(self):
        return self._repo.head.commit.hexsha

    @property
    def head_message(self):
        return self._repo.head.commit.message.strip()
