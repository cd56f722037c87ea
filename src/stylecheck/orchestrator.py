"""Main orchestrator coordinating all components."""
import os
from contextlib import AbstractContextManager, nullcontext
from pathlib import Path
from typing import Callable

import click

from stylecheck.config import Config, LinterConfig, RunOptions
from stylecheck.git_utils import (
    GitNotInstalledError,
    collect_changed_files,
    get_new_files,
    get_repo_root,
    git_installed,
)
from stylecheck.logging_config import get_logger
from stylecheck.metrics import RunMetrics
from stylecheck.reporter import (
    format_linter_header,
    format_match_count,
    format_matched_files,
    format_missing_git,
)
from stylecheck.router import match_files, selected_linters
from stylecheck.runner import bin_exists, handle_missing_linter, run_installer, run_linter
from stylecheck.validation import validate_branch, validate_file_type, validate_project_root

logger = get_logger(__name__)

StatusFactory = Callable[[str], AbstractContextManager]


def ensure_git(project_root: Path, config: Config, options: RunOptions) -> None:
    """Stop the run when git is missing, installing it first if requested.

    Args:
        project_root: Working directory for the installer
        config: Configuration holding the git installer command
        options: Run options

    Raises:
        GitNotInstalledError: If git is not on PATH
    """
    if git_installed():
        return

    click.echo(format_missing_git(config.git_installer))

    if options.run_installer:
        click.echo("Installing git...")
        run_installer(config.git_installer, options, project_root)

    raise GitNotInstalledError("git is not installed")


def _status_factory(config: Config, options: RunOptions) -> StatusFactory:
    """Build the spinner shown while a linter runs.

    Args:
        config: Configuration
        options: Run options

    Returns:
        Callable taking a linter name and returning a context manager
    """
    show_progress = (
        config.show_progress
        and not options.reporting
        and not os.environ.get("STYLECHECK_NO_PROGRESS")
    )
    if not show_progress:
        return lambda name: nullcontext()

    from rich.console import Console

    console = Console(stderr=True)
    if not console.is_terminal:
        return lambda name: nullcontext()

    return lambda name: console.status(f"[bold blue]Running {name}...")


def run_check(
    tag: str,
    linter: LinterConfig,
    files: list[str],
    project_root: Path,
    options: RunOptions,
    new_files: set[str],
    metrics: RunMetrics,
    status: StatusFactory | None = None,
) -> None:
    """Route files to one linter group and run it.

    Args:
        tag: Group tag
        linter: Linter descriptor
        files: All candidate files
        project_root: Repository root
        options: Run options
        new_files: Untracked or newly added files
        metrics: Metrics updated in place
        status: Spinner factory
    """
    if options.reporting:
        click.echo(format_linter_header(linter.bin))

    matched = match_files(tag, linter, files)

    if options.reporting:
        click.echo(format_match_count(tag, len(matched)))
    if options.verbose and matched:
        click.echo(format_matched_files(matched))

    if not bin_exists(linter.bin):
        metrics.linters_missing += 1
        if handle_missing_linter(linter, options, project_root):
            metrics.installers_run += 1
        return

    if not matched:
        return

    metrics.linters_run += 1
    metrics.files_linted += len(matched)

    status = status or (lambda name: nullcontext())
    with status(linter.bin):
        run_linter(linter, matched, options, project_root, new_files)


def run_checks(project_root: Path, config: Config, options: RunOptions) -> RunMetrics:
    """Lint the changed files of a repository.

    Args:
        project_root: Directory the run starts from, anywhere in the work tree
        config: Configuration
        options: Run options

    Returns:
        Metrics for the run

    Raises:
        ValueError: If inputs are invalid
        GitNotInstalledError: If git is not installed
    """
    metrics = RunMetrics()

    validate_project_root(project_root)
    validate_file_type(options.file_type, config.linters)
    if options.check_branch:
        validate_branch(options.vs_branch)

    ensure_git(project_root, config, options)
    repo_root = get_repo_root(project_root)

    files = collect_changed_files(repo_root, options)
    metrics.files_collected = len(files)

    new_files = set(get_new_files(repo_root)) if options.lines_only else set()
    status = _status_factory(config, options)

    for tag, linter in selected_linters(config.linters, options).items():
        run_check(tag, linter, files, repo_root, options, new_files, metrics, status)

    metrics.finish()
    logger.info(metrics.summary())
    return metrics
