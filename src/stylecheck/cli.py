"""Command-line interface for stylecheck."""
import sys
from pathlib import Path

import click

from stylecheck.__version__ import __version__
from stylecheck.config import CONFIG_FILENAME, MAIN_BRANCH, RunOptions, load_config
from stylecheck.git_utils import GitNotInstalledError
from stylecheck.logging_config import get_logger, setup_logging
from stylecheck.orchestrator import run_checks


@click.command()
@click.version_option(version=__version__, prog_name="stylecheck")
@click.option("-v", "--verbose", is_flag=True, help="Run verbosely")
@click.option("-q", "--quiet", is_flag=True, help="Suppress warnings (errors only)")
@click.option("-t", "--test", is_flag=True, help="Test mode: print commands instead of running them")
@click.option(
    "-f", "--filetype", "file_type", type=str, metavar="TYPE",
    help="Run lint checks on a specific file type (rb, js, haml, scss)",
)
@click.option(
    "-b", "--branch", "branch", is_flag=False, flag_value=MAIN_BRANCH, default=None,
    metavar="[BRANCH]",
    help=f"Check files in the current branch vs another (defaults to {MAIN_BRANCH})",
)
@click.option("-l", "--lines", "lines_only", is_flag=True, help="Only report offenses on changed lines")
@click.option("-a", "--auto-correct", "autocorrect", is_flag=True, help="Run linter auto-correct if available")
@click.option("--run-installer", is_flag=True, help="Run installers for missing linters")
@click.option("--config", type=click.Path(exists=True), help="Path to config file")
def main(
    verbose: bool,
    quiet: bool,
    test: bool,
    file_type: str | None,
    branch: str | None,
    lines_only: bool,
    autocorrect: bool,
    run_installer: bool,
    config: str | None,
) -> None:
    """StyleCheck Your Changes

    Checks git for changed files and sends them to linters for style
    validation.
    """
    setup_logging(verbose=verbose, quiet=quiet)

    options = RunOptions(
        verbose=verbose,
        test=test,
        file_type=file_type,
        check_branch=branch is not None,
        vs_branch=branch or MAIN_BRANCH,
        autocorrect=autocorrect,
        run_installer=run_installer,
        lines_only=lines_only,
    )

    project_root = Path.cwd()
    config_path = Path(config) if config else project_root / CONFIG_FILENAME

    try:
        cfg = load_config(config_path)
        run_checks(project_root, cfg, options)
    except GitNotInstalledError:
        sys.exit(1)
    except KeyboardInterrupt:
        click.echo("\nOperation cancelled by user", err=True)
        sys.exit(130)  # Standard SIGINT exit code
    except (ValueError, FileNotFoundError, RuntimeError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)
    except Exception as e:
        logger = get_logger(__name__)
        logger.exception("Unexpected error during execution")
        click.echo(
            f"An unexpected error occurred: {e}\n" "Run with --verbose for details.", err=True
        )
        sys.exit(2)


if __name__ == "__main__":
    main()
