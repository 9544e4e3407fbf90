"""
Tests for the external command runner.
"""

import os
import sys

import pytest

from modcommit.exit_codes import CommandFailed, COMMAND_FAILED, NOT_FOUND_STATUS
from modcommit.infra.runner import run_command


class TestRunCommand:
    """Tests for run_command."""

    def test_returns_stdout(self):
        output = run_command(sys.executable, ["-c", "print('hello')"])
        assert output == "hello\n"

    def test_feeds_stdin(self):
        script = "import sys; sys.stdout.write(sys.stdin.read().upper())"
        output = run_command(sys.executable, ["-c", script], input="payload")
        assert output == "PAYLOAD"

    def test_passes_explicit_env(self):
        env = dict(os.environ, MODCOMMIT_TEST_VALUE="42")
        script = "import os; print(os.environ['MODCOMMIT_TEST_VALUE'])"
        output = run_command(sys.executable, ["-c", script], env=env)
        assert output.strip() == "42"
        assert "MODCOMMIT_TEST_VALUE" not in os.environ

    def test_runs_in_cwd(self, tmp_path):
        output = run_command(sys.executable, ["-c", "import os; print(os.getcwd())"], cwd=str(tmp_path))
        assert os.path.samefile(output.strip(), tmp_path)

    def test_nonzero_exit_raises(self):
        with pytest.raises(CommandFailed) as exc_info:
            run_command(sys.executable, ["-c", "import sys; sys.exit(3)"])

        error = exc_info.value
        assert error.program == sys.executable
        assert error.arguments == ["-c", "import sys; sys.exit(3)"]
        assert error.returncode == 3
        assert error.exit_code == COMMAND_FAILED
        assert "exit status 3" in str(error)
        assert sys.executable in str(error)

    def test_missing_program_raises(self):
        with pytest.raises(CommandFailed) as exc_info:
            run_command("modcommit-no-such-program", ["--flag"])

        assert exc_info.value.returncode == NOT_FOUND_STATUS
        assert "modcommit-no-such-program --flag" in str(exc_info.value)
