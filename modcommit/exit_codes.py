"""
Standard exit codes for modcommit.

Following Unix/POSIX conventions for command-line tools.
"""
from typing import Optional, Sequence

# Standard POSIX exit codes
SUCCESS = 0              # Successful termination
GENERAL_ERROR = 1        # General errors
USAGE_ERROR = 2          # Misuse of shell command (wrong arguments, etc.)

# Application-specific exit codes (64-113 are typically available)
COMMAND_FAILED = 65      # External command (git, pip, npm) failed
CONFIG_ERROR = 66        # Configuration file error
INTERRUPTED = 130        # Terminated by Ctrl+C (SIGINT)

# Exit status reported when a program cannot be started at all
NOT_FOUND_STATUS = 127


class CommandError(Exception):
    """
    Exception that commands can raise to indicate specific exit codes.
    """
    def __init__(self, message: str, exit_code: int = GENERAL_ERROR):
        super().__init__(message)
        self.exit_code = exit_code


class CommandFailed(CommandError):
    """Raised when an external program exits with a non-zero status."""
    def __init__(self, program: str, args: Sequence[str], returncode: int):
        self.program = program
        self.arguments = list(args)
        self.returncode = returncode
        command = ' '.join([program] + self.arguments)
        super().__init__(
            f"command failed with exit status {returncode}: {command}",
            COMMAND_FAILED,
        )


class ConfigError(CommandError):
    """Raised when there's a configuration error."""
    def __init__(self, message: str, path: Optional[str] = None):
        if path:
            message = f"{path}: {message}"
        super().__init__(message, CONFIG_ERROR)
