"""
modcommit - Commit freshly installed package-manager modules to git.

modcommit installs modules into a temporary directory and records that
directory as a commit object on top of a parent, without touching the
working tree, the index or any ref of the repository.

Quick Start:
    from modcommit import ModuleCommitService

    service = ModuleCommitService()
    result = service.build(["requests"], parent="HEAD")
    print(result.commit, result.tree)

Command line:
    modcommit [--parent REF] [--installer pip|npm] MODULE...
"""

__version__ = "0.1.0"

from .domain import CommitResult
from .exit_codes import CommandError, CommandFailed, ConfigError
from .infra import GitClient, PackageInstaller, run_command
from .services import ModuleCommitService
from .config import load_config

__all__ = [
    "__version__",
    "CommitResult",
    "CommandError",
    "CommandFailed",
    "ConfigError",
    "GitClient",
    "PackageInstaller",
    "run_command",
    "ModuleCommitService",
    "load_config",
]
