"""Input validation functions."""
from pathlib import Path

from stylecheck.config import LinterConfig


def validate_project_root(project_root: Path) -> None:
    """Validate project root directory exists.

    Args:
        project_root: Path to validate

    Raises:
        ValueError: If path does not exist or is not a directory
    """
    if not project_root.exists():
        raise ValueError(f"Project root does not exist: {project_root}")

    if not project_root.is_dir():
        raise ValueError(f"Project root is not a directory: {project_root}")


def validate_file_type(file_type: str | None, linters: dict[str, LinterConfig]) -> None:
    """Validate the file-type filter against the configured linter tags.

    Args:
        file_type: Requested group tag, or None for all groups
        linters: Configured linters keyed by tag

    Raises:
        ValueError: If the tag is not configured
    """
    if file_type is None:
        return

    if file_type not in linters:
        raise ValueError(
            f"Invalid file type: {file_type}. Must be one of: {', '.join(linters)}"
        )


def validate_branch(branch: str) -> None:
    """Validate the comparison branch name.

    Args:
        branch: Branch or revision to compare against

    Raises:
        ValueError: If the name is empty or looks like an option
    """
    if not branch.strip():
        raise ValueError("Branch name cannot be empty")

    if branch.startswith("-"):
        raise ValueError(f"Invalid branch name: {branch}")
