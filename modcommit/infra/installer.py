"""
Package installer infrastructure for modcommit.

Wraps the package managers that can populate a directory with modules.
Dependency resolution is left to the package manager itself.
"""

import logging
import sys
from typing import Any, Dict, List, Optional, Sequence

from ..exit_codes import ConfigError
from .runner import run_command

logger = logging.getLogger(__name__)

INSTALLERS = ('pip', 'npm')


class PackageInstaller:
    """
    Installs modules into a target directory with pip or npm.

    Example:
        installer = PackageInstaller('pip')
        installer.install(['requests'], '/tmp/target')
    """

    def __init__(
        self,
        name: str = 'pip',
        extra_args: Optional[Sequence[str]] = None,
        python: Optional[str] = None,
        npm: str = 'npm',
    ):
        """
        Initialize PackageInstaller.

        Args:
            name: Installer to use, one of INSTALLERS
            extra_args: Extra arguments placed before the module names
            python: Interpreter whose pip is used (default: the running one)
            npm: npm executable
        """
        if name not in INSTALLERS:
            raise ConfigError(
                f"unknown installer '{name}' (expected one of: {', '.join(INSTALLERS)})"
            )
        self.name = name
        self.extra_args = list(extra_args or [])
        self.python = python or sys.executable
        self.npm = npm

    @classmethod
    def from_config(cls, config: Dict[str, Any], name: Optional[str] = None) -> 'PackageInstaller':
        """
        Build an installer from the ``installer`` config section.

        Args:
            config: Full configuration dict
            name: Installer name overriding the configured one
        """
        section = config['installer']
        return cls(
            name=name or section['name'],
            extra_args=section.get('extra_args'),
            python=section.get('python'),
            npm=section.get('npm', 'npm'),
        )

    def command(self, modules: Sequence[str], target: str) -> List[str]:
        """Full command line that installs ``modules`` into ``target``."""
        if self.name == 'pip':
            return [
                self.python, '-m', 'pip', 'install',
                '--target', target,
                '--no-compile',
                '--disable-pip-version-check',
                *self.extra_args,
                *modules,
            ]
        return [
            self.npm, 'install',
            '--prefix', target,
            '--no-audit',
            '--no-fund',
            *self.extra_args,
            *modules,
        ]

    def install(self, modules: Sequence[str], target: str) -> None:
        """
        Install modules into target.

        Nothing is run when ``modules`` is empty.

        Raises:
            CommandFailed: The package manager exited non-zero
        """
        modules = list(modules)
        if not modules:
            logger.info("No modules requested, skipping installation")
            return

        program, *args = self.command(modules, target)
        logger.info(f"Installing {len(modules)} module(s) with {self.name}")
        output = run_command(program, args, cwd=target)
        if output:
            logger.debug(output.rstrip())
