"""
Module commit service for modcommit.

Installs modules into a scratch directory and turns that directory into
a commit object, leaving the caller's working tree, index and refs alone.
Used by the `modcommit` command.
"""

import logging
import os
import tempfile
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional, Sequence

from ..config import load_config
from ..domain.result import CommitResult
from ..infra.git_client import GitClient
from ..infra.installer import PackageInstaller

logger = logging.getLogger(__name__)

MESSAGE_PREFIX = "Add modules: "


def commit_message(modules: Sequence[str]) -> str:
    """Fixed commit message listing the modules."""
    listing = ", ".join(modules) if modules else "(none)"
    return f"{MESSAGE_PREFIX}{listing}\n"


@contextmanager
def temporary_index() -> Iterator[str]:
    """
    Yield a path for a fresh git index file.

    The file is created to reserve a unique name and unlinked at once,
    so git starts from an empty index. Whatever git leaves at the path
    is removed on exit.
    """
    fd, path = tempfile.mkstemp(prefix="modcommit-", suffix=".index")
    os.close(fd)
    os.unlink(path)
    try:
        yield path
    finally:
        if os.path.exists(path):
            os.unlink(path)


class ModuleCommitService:
    """
    Builds a commit containing freshly installed modules.

    Example:
        service = ModuleCommitService()
        result = service.build(["requests"], parent="main")
        print(result.commit)
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        git_client: Optional[GitClient] = None,
        installer: Optional[PackageInstaller] = None,
    ):
        """
        Initialize ModuleCommitService.

        Args:
            config: Configuration dict (loads default if None)
            git_client: GitClient instance (built from config if None)
            installer: PackageInstaller instance (built from config if None)
        """
        self.config = config or load_config()
        self.git = git_client or GitClient(
            executable=self.config["git"]["executable"],
        )
        self.installer = installer or PackageInstaller.from_config(self.config)

    def build(self, modules: Sequence[str], parent: str = "HEAD") -> CommitResult:
        """
        Install modules and commit them on top of parent.

        Fails fast: the first CommandFailed propagates. Objects git wrote
        before the failure stay unreferenced in the object database.

        Args:
            modules: Module names handed to the installer
            parent: Reference of the parent commit

        Returns:
            CommitResult with the new commit and tree ids
        """
        modules = list(modules)

        # Resolve before installing so a bad parent costs nothing
        parent_commit = self.git.resolve_commit(parent)
        git_dir = self.git.resolve_git_dir()
        message = commit_message(modules)

        with tempfile.TemporaryDirectory(prefix="modcommit-") as work_tree, \
                temporary_index() as index_file:
            logger.debug(f"Work tree {work_tree}, index {index_file}")

            self.installer.install(modules, work_tree)

            env = self.git.scratch_env(index_file, work_tree, git_dir=git_dir)
            self.git.add_all(env)
            tree = self.git.write_tree(env)
            commit = self.git.commit_tree(tree, parent_commit, message, env)

        logger.info(f"Created commit {commit} (tree {tree}) on {parent_commit}")

        return CommitResult(
            parent_ref=parent,
            parent=parent_commit,
            tree=tree,
            commit=commit,
            installer=self.installer.name,
            message=message,
            modules=modules,
        )
