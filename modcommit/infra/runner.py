"""
External command execution for modcommit.

Every program modcommit drives (git, pip, npm) is started through
run_command, so failures surface the same way everywhere.
"""

import logging
import subprocess
from typing import Mapping, Optional, Sequence

from ..exit_codes import CommandFailed, NOT_FOUND_STATUS

logger = logging.getLogger(__name__)


def run_command(
    program: str,
    args: Sequence[str],
    input: Optional[str] = None,
    env: Optional[Mapping[str, str]] = None,
    cwd: Optional[str] = None,
) -> str:
    """
    Run a program and return its standard output.

    Standard error is not captured, so the program's diagnostics reach
    the user directly.

    Args:
        program: Executable name or path
        args: Arguments passed to the program (no shell involved)
        input: Text fed to the program's standard input
        env: Complete environment for the child; None inherits ours
        cwd: Working directory for the child

    Returns:
        Captured standard output

    Raises:
        CommandFailed: The program exited non-zero or could not be started
    """
    args = list(args)
    logger.debug(f"Running: {program} {' '.join(args)}")

    try:
        result = subprocess.run(
            [program] + args,
            input=input,
            stdout=subprocess.PIPE,
            env=dict(env) if env is not None else None,
            cwd=cwd,
            text=True,
        )
    except OSError as e:
        logger.debug(f"Could not start {program}: {e}")
        raise CommandFailed(program, args, NOT_FOUND_STATUS) from e

    if result.returncode != 0:
        raise CommandFailed(program, args, result.returncode)

    return result.stdout
