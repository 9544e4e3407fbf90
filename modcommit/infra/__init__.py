"""
Infrastructure layer for modcommit.

Contains abstractions for external systems:
- run_command: External program execution
- GitClient: Git plumbing commands
- PackageInstaller: pip / npm module installation

These provide clean interfaces that can be mocked for testing.
"""

from .runner import run_command
from .git_client import GitClient, EMPTY_TREE
from .installer import PackageInstaller, INSTALLERS

__all__ = [
    'run_command',
    'GitClient',
    'EMPTY_TREE',
    'PackageInstaller',
    'INSTALLERS',
]
