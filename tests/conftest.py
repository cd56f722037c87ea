import subprocess
from pathlib import Path

import pytest


def git(repo_dir: Path, *args: str) -> None:
    subprocess.run(["git", *args], cwd=repo_dir, check=True, capture_output=True)


def setup_git_repo(tmpdir: Path) -> Path:
    """Helper to set up a git repo with one committed Ruby file."""
    repo_dir = tmpdir / "repo"
    repo_dir.mkdir()

    git(repo_dir, "init")
    git(repo_dir, "config", "user.email", "test@example.com")
    git(repo_dir, "config", "user.name", "Test User")
    git(repo_dir, "config", "commit.gpgsign", "false")

    (repo_dir / "app.rb").write_text("a = 1\nb = 2\nc = 3\n")
    (repo_dir / "site.js").write_text("var x = 1;\n")
    git(repo_dir, "add", ".")
    git(repo_dir, "commit", "-m", "initial")

    return repo_dir


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    return setup_git_repo(tmp_path)
