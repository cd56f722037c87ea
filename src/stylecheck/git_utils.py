"""Git integration utilities.

Each git subcommand used here has a narrow parser beside it so that a change
in git's output format stays a local fix:

- ``git status --short``: status marker, then the path as the last token
- ``git diff --name-only``: whitespace-separated paths
- ``git diff -U0``: hunk headers ``@@ -a[,b] +c[,d] @@``
- ``git blame --porcelain``: ``<sha> <orig-line> <final-line>`` headers
"""
import re
import shutil
import subprocess
from pathlib import Path

from stylecheck.config import RunOptions
from stylecheck.logging_config import get_logger

# Timeout for git operations in seconds
GIT_TIMEOUT = 30

HUNK_HEADER_RE = re.compile(r"^@@ -\d+(?:,\d+)? \+(\d+)(?:,(\d+))? @@", re.MULTILINE)
UNCOMMITTED_BLAME_RE = re.compile(r"^0{40,} \d+ (\d+)", re.MULTILINE)

logger = get_logger(__name__)


class GitNotInstalledError(RuntimeError):
    """Raised when the git executable cannot be found."""


def git_installed() -> bool:
    """Check whether git is available on PATH."""
    return shutil.which("git") is not None


def run_git(repo_path: Path, *args: str) -> str:
    """Run a git subcommand and return its stdout.

    A failing command (unknown branch, not a repository, untracked file
    passed to blame) is logged and treated as empty output.

    Args:
        repo_path: Directory to run git in
        *args: Arguments after ``git``

    Returns:
        Captured stdout, or an empty string if git exited non-zero

    Raises:
        GitNotInstalledError: If git is not installed
        RuntimeError: If the git command times out
    """
    cmd = ["git", *args]
    logger.debug(f"Running {' '.join(cmd)}")
    try:
        result = subprocess.run(
            cmd,
            cwd=repo_path,
            check=True,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            timeout=GIT_TIMEOUT,
        )
    except subprocess.TimeoutExpired as e:
        raise RuntimeError(f"Git command timed out after {GIT_TIMEOUT}s") from e
    except FileNotFoundError as e:
        raise GitNotInstalledError("git is not installed") from e
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        logger.warning(f"'{' '.join(cmd)}' failed: {stderr or f'exit status {e.returncode}'}")
        return ""

    return result.stdout


def get_repo_root(path: Path) -> Path:
    """Get the top-level directory of the repository containing path.

    Status output is relative to the working directory while diff output is
    relative to the top level, so every git and linter call runs from here.

    Args:
        path: Any directory inside the working tree

    Returns:
        Repository root, or path itself when it is not inside a repository
    """
    toplevel = run_git(path, "rev-parse", "--show-toplevel").strip()
    return Path(toplevel) if toplevel else path


def parse_status(output: str) -> list[tuple[str, str]]:
    """Parse short status output into (marker, path) pairs.

    Renames (``R  old -> new``) resolve to the new path.
    """
    entries = []
    for line in output.splitlines():
        parts = line.split()
        if len(parts) < 2:
            continue
        entries.append((parts[0], parts[-1]))
    return entries


def local_files_from_status(output: str) -> list[str]:
    """Paths with local changes, excluding deleted entries."""
    return _unique(path for marker, path in parse_status(output) if "D" not in marker)


def new_files_from_status(output: str) -> list[str]:
    """Paths that are untracked or newly added to the index."""
    return _unique(
        path
        for marker, path in parse_status(output)
        if marker == "??" or (marker.startswith("A") and "D" not in marker)
    )


def parse_name_only(output: str) -> list[str]:
    """Parse ``git diff --name-only`` output."""
    return _unique(output.split())


def parse_hunk_lines(diff_output: str) -> set[int]:
    """Line numbers in the new file touched by each hunk of a ``-U0`` diff.

    A hunk ``+start,count`` covers ``start .. start + count - 1``; a missing
    count means one line and a count of zero (pure deletion) covers none.
    Lines that do not look like hunk headers are ignored.

    Args:
        diff_output: Unified diff text

    Returns:
        Set of changed line numbers
    """
    lines: set[int] = set()
    for match in HUNK_HEADER_RE.finditer(diff_output):
        start = int(match.group(1))
        count = int(match.group(2)) if match.group(2) is not None else 1
        lines.update(range(start, start + count))
    return lines


def parse_uncommitted_lines(blame_output: str) -> set[int]:
    """Final line numbers that porcelain blame attributes to the zero revision."""
    return {int(m.group(1)) for m in UNCOMMITTED_BLAME_RE.finditer(blame_output)}


def get_local_files(repo_path: Path) -> list[str]:
    """Get files with uncommitted changes, excluding deletions.

    Args:
        repo_path: Path to git repository

    Returns:
        List of changed file paths
    """
    return local_files_from_status(_status(repo_path))


def get_new_files(repo_path: Path) -> list[str]:
    """Get untracked and newly added files.

    Args:
        repo_path: Path to git repository

    Returns:
        List of file paths that have no committed history
    """
    return new_files_from_status(_status(repo_path))


def get_changed_files_from_branch(repo_path: Path, base_branch: str) -> list[str]:
    """Get files changed from a base branch.

    Args:
        repo_path: Path to git repository
        base_branch: Base branch to compare against (e.g., 'master', 'HEAD~1')

    Returns:
        List of changed file paths relative to repo root
    """
    return parse_name_only(run_git(repo_path, "diff", "--name-only", base_branch))


def collect_changed_files(repo_path: Path, options: RunOptions) -> list[str]:
    """Collect the candidate files for a run.

    Local changes are always included; branch mode adds the files that differ
    from the comparison branch.

    Args:
        repo_path: Path to git repository
        options: Run options

    Returns:
        Deduplicated list of file paths
    """
    files = get_local_files(repo_path)
    if options.check_branch:
        files = _unique(files + get_changed_files_from_branch(repo_path, options.vs_branch))
    logger.info(f"Collected {len(files)} changed file(s)")
    return files


def get_uncommitted_lines(repo_path: Path, file_path: str) -> set[int]:
    """Get line numbers of a file that differ from the last commit.

    Args:
        repo_path: Path to git repository
        file_path: File path relative to repo_path

    Returns:
        Set of line numbers
    """
    return parse_uncommitted_lines(run_git(repo_path, "blame", "--porcelain", "--", file_path))


def get_branch_lines(repo_path: Path, base_branch: str, file_path: str) -> set[int]:
    """Get line numbers of a file that were added or changed since a branch.

    Args:
        repo_path: Path to git repository
        base_branch: Branch to compare against
        file_path: File path relative to repo_path

    Returns:
        Set of line numbers
    """
    return parse_hunk_lines(run_git(repo_path, "diff", "-U0", base_branch, "--", file_path))


def get_changed_lines(repo_path: Path, file_path: str, options: RunOptions) -> set[int]:
    """Get the changed-line set of a file for lines-only filtering.

    Args:
        repo_path: Path to git repository
        file_path: File path relative to repo_path
        options: Run options; branch lines are added in branch mode

    Returns:
        Set of line numbers
    """
    lines = get_uncommitted_lines(repo_path, file_path)
    if options.check_branch:
        lines |= get_branch_lines(repo_path, options.vs_branch, file_path)
    return lines


def _status(repo_path: Path) -> str:
    return run_git(repo_path, "status", "--short", "--untracked-files=all")


def _unique(paths) -> list[str]:
    return list(dict.fromkeys(paths))
