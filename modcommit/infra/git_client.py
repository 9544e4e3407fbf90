"""
Git client infrastructure for modcommit.

Provides a clean abstraction over the git plumbing commands used to
build a commit from a directory without touching the caller's
working tree or index. All git operations go through this client,
making them:
- Easy to mock for testing
- Consistent in error handling
- Isolated from business logic
"""

import logging
import os
from typing import Dict, Optional

from .runner import run_command

logger = logging.getLogger(__name__)

EMPTY_TREE = "4b825dc642cb6eb9a060e54bf8d69288fbee4904"


class GitClient:
    """
    Abstraction over git plumbing commands.

    The git directory is taken from ``git_dir`` when given, otherwise
    from the ``GIT_DIR`` environment variable, otherwise from git's
    normal discovery starting at the current directory.

    Example:
        client = GitClient()
        parent = client.resolve_commit("HEAD")
        env = client.scratch_env("/tmp/index", "/tmp/tree")
        client.add_all(env)
        tree = client.write_tree(env)
        commit = client.commit_tree(tree, parent, "message", env)
    """

    def __init__(self, executable: str = "git", git_dir: Optional[str] = None):
        """
        Initialize GitClient.

        Args:
            executable: git binary to run (default: "git")
            git_dir: Explicit git directory, overriding GIT_DIR
        """
        self.executable = executable
        self.git_dir = git_dir

    def _git(self, *args: str, env: Optional[Dict[str, str]] = None,
             input: Optional[str] = None, cwd: Optional[str] = None) -> str:
        output = run_command(
            self.executable,
            args,
            input=input,
            env=env if env is not None else self.base_env(),
            cwd=cwd,
        )
        return output.strip()

    def base_env(self) -> Dict[str, str]:
        """Environment for git calls that operate on the caller's repository."""
        env = dict(os.environ)
        if self.git_dir:
            env["GIT_DIR"] = self.git_dir
        return env

    def resolve_commit(self, ref: str) -> str:
        """
        Resolve a reference to a full commit id.

        Raises:
            CommandFailed: ref does not name a commit
        """
        commit = self._git("rev-parse", "--verify", "--end-of-options", f"{ref}^{{commit}}")
        logger.debug(f"Resolved {ref} to {commit}")
        return commit

    def resolve_git_dir(self) -> str:
        """Absolute path of the repository's git directory."""
        return self._git("rev-parse", "--absolute-git-dir")

    def scratch_env(self, index_file: str, work_tree: str,
                    git_dir: Optional[str] = None) -> Dict[str, str]:
        """
        Build an environment that points git at a private index and work tree.

        The returned mapping is passed to each subprocess; os.environ is
        left untouched.
        """
        env = self.base_env()
        env["GIT_DIR"] = git_dir or self.resolve_git_dir()
        env["GIT_INDEX_FILE"] = index_file
        env["GIT_WORK_TREE"] = work_tree
        return env

    def add_all(self, env: Dict[str, str]) -> None:
        """Stage every file of the work tree, including ignored ones."""
        self._git("add", "--all", "--force", env=env, cwd=env["GIT_WORK_TREE"])

    def write_tree(self, env: Dict[str, str]) -> str:
        """Write the index as a tree object and return its id."""
        return self._git("write-tree", env=env)

    def commit_tree(self, tree: str, parent: str, message: str,
                    env: Optional[Dict[str, str]] = None) -> str:
        """Create a commit object for ``tree`` on top of ``parent``."""
        return self._git("commit-tree", tree, "-p", parent, env=env, input=message)
