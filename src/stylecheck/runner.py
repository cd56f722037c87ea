"""Invocation of external linters and installers."""
import shlex
import shutil
import subprocess
from pathlib import Path

import click

from stylecheck.config import LinterConfig, RunOptions
from stylecheck.git_utils import get_changed_lines
from stylecheck.line_filter import filter_output
from stylecheck.logging_config import get_logger
from stylecheck.reporter import format_command, format_missing_linter, format_test_command

logger = get_logger(__name__)


def bin_exists(bin_name: str) -> bool:
    """Check whether an executable is available on PATH."""
    return shutil.which(bin_name) is not None


def build_command(linter: LinterConfig, options: RunOptions, files: list[str]) -> list[str]:
    """Compose a linter command line.

    Args:
        linter: Linter descriptor
        options: Run options; auto-correct appends the linter's option
        files: Files to lint

    Returns:
        Argument list starting with the linter binary
    """
    cmd = [linter.bin, *shlex.split(linter.opts)]
    if options.autocorrect and linter.autocorrect_opt:
        cmd.extend(shlex.split(linter.autocorrect_opt))
    cmd.extend(files)
    return cmd


def execute(cmd: list[str], cwd: Path) -> str:
    """Run a linter and return its stdout.

    The linter's stderr is discarded and its exit status ignored, since
    linters exit non-zero whenever they report offenses.

    Args:
        cmd: Command to run
        cwd: Working directory

    Returns:
        Captured stdout, empty if the linter could not be started
    """
    logger.info(f"Running {format_command(cmd)}")
    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError as e:
        logger.warning(f"Could not run {cmd[0]}: {e}")
        return ""
    return result.stdout


def echo_output(output: str) -> None:
    """Print tool output, skipping output that is only whitespace."""
    if output.strip():
        click.echo(output.rstrip("\n"))


def run_installer(command: str, options: RunOptions, cwd: Path) -> bool:
    """Run an installer shell command and print its output.

    Args:
        command: Shell command, possibly several joined with ';'
        options: Run options; test mode prints the command only
        cwd: Working directory

    Returns:
        True if the installer was executed
    """
    click.echo(command)
    if options.test:
        return False

    result = subprocess.run(
        command,
        shell=True,
        cwd=cwd,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        encoding="utf-8",
        errors="replace",
        check=False,
    )
    if result.returncode != 0:
        logger.warning(f"Installer exited with status {result.returncode}: {command}")
    echo_output(result.stdout)
    return True


def handle_missing_linter(linter: LinterConfig, options: RunOptions, cwd: Path) -> bool:
    """Install a missing linter or report it.

    Args:
        linter: Linter descriptor whose binary is missing
        options: Run options
        cwd: Working directory

    Returns:
        True if an installer was executed
    """
    if options.run_installer:
        click.echo(f"Running {linter.bin} installer")
        return run_installer(linter.installer, options, cwd)

    if options.reporting:
        click.echo(format_missing_linter(linter.bin, linter.installer))
    else:
        logger.info(format_missing_linter(linter.bin, linter.installer))
    return False


def run_linter(
    linter: LinterConfig,
    files: list[str],
    options: RunOptions,
    repo_path: Path,
    new_files: set[str],
) -> None:
    """Run a linter over matched files and print its output.

    In bulk mode the linter runs once over all files. In lines-only mode it
    runs once per file and only diagnostics on changed lines are printed,
    except for new files, whose output is printed in full.

    Args:
        linter: Linter descriptor
        files: Matched files, never empty
        options: Run options
        repo_path: Repository root, used as working directory
        new_files: Untracked or newly added files
    """
    if not options.lines_only:
        cmd = build_command(linter, options, files)
        if options.test:
            click.echo(format_test_command(cmd))
            return
        echo_output(execute(cmd, repo_path))
        return

    for file_path in files:
        cmd = build_command(linter, options, [file_path])
        if options.test:
            click.echo(format_test_command(cmd))
            continue

        output = execute(cmd, repo_path)
        if file_path in new_files:
            echo_output(output)
            continue

        changed_lines = get_changed_lines(repo_path, file_path, options)
        logger.debug(f"{file_path}: {len(changed_lines)} changed line(s)")
        echo_output(filter_output(file_path, output, changed_lines))
