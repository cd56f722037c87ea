"""stylecheck: lint the files you changed."""

from stylecheck.__version__ import __version__
from stylecheck.config import Config, LinterConfig, RunOptions, get_default_config, load_config
from stylecheck.orchestrator import run_checks
from stylecheck.types import Diagnostic

__all__ = [
    "__version__",
    "Config",
    "LinterConfig",
    "RunOptions",
    "load_config",
    "get_default_config",
    "run_checks",
    "Diagnostic",
]
