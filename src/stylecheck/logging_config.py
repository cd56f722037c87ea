"""Logging setup for stylecheck.

Linter output and test-mode commands go to stdout through ``click.echo``;
log records go to stderr so the two never interleave in a pipe.
"""
import logging
import sys

LOGGER_NAME = "stylecheck"


def _level_for(verbose: bool, quiet: bool) -> int:
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.INFO
    return logging.WARNING


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Attach a single stderr handler to the ``stylecheck`` logger.

    Args:
        verbose: Also show INFO records (commands run, run summary)
        quiet: Show errors only; wins over verbose
    """
    level = _level_for(verbose, quiet)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return a child of the ``stylecheck`` logger for a module name."""
    if name != LOGGER_NAME and not name.startswith(f"{LOGGER_NAME}."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
