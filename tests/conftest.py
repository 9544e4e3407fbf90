"""
Shared fixtures for modcommit tests.
"""

import shutil
import subprocess
from pathlib import Path

import pytest


def git(repo_path, *args):
    """Run git in repo_path and return stripped stdout."""
    result = subprocess.run(
        ["git", *args], cwd=repo_path, capture_output=True, text=True, check=True
    )
    return result.stdout.strip()


class FakeInstaller:
    """Stands in for PackageInstaller; writes one small package per module."""

    name = "fake"

    def __init__(self):
        self.calls = []

    def install(self, modules, target):
        self.calls.append((list(modules), target))
        for module in modules:
            package = Path(target) / module
            package.mkdir(parents=True, exist_ok=True)
            (package / "__init__.py").write_text(f"# {module}\n")


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep user configuration and stray git variables out of the tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    for name in ("GIT_DIR", "GIT_INDEX_FILE", "GIT_WORK_TREE", "XDG_CONFIG_HOME", "MODCOMMIT_CONFIG"):
        monkeypatch.delenv(name, raising=False)
    return home


@pytest.fixture
def git_repo(tmp_path, monkeypatch):
    """A repository with one commit; the current directory is its work tree."""
    if shutil.which("git") is None:
        pytest.skip("git not installed")

    repo_path = tmp_path / "repo"
    repo_path.mkdir()
    git(repo_path, "init", "-q")
    git(repo_path, "config", "user.email", "test@example.com")
    git(repo_path, "config", "user.name", "Test User")
    (repo_path / "README.md").write_text("# repo\n")
    git(repo_path, "add", "README.md")
    git(repo_path, "commit", "-q", "-m", "Initial commit")

    monkeypatch.chdir(repo_path)
    return repo_path


@pytest.fixture
def fake_installer():
    return FakeInstaller()
