"""Configuration management for stylecheck."""
import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

MAIN_BRANCH = "master"
GIT_INSTALLER = "brew install git"
CONFIG_FILENAME = ".stylecheck.json"


class LinterConfig(BaseModel):
    """Static description of one external linter."""

    bin: str = Field(min_length=1, description="Executable name looked up on PATH")
    opts: str = Field(default="", description="Options always passed to the linter")
    autocorrect_opt: str | None = Field(default=None, description="Option enabling auto-correct")
    installer: str = Field(default="", description="Shell command that installs the linter")
    extensions: list[str] = Field(
        default_factory=list, description="File suffixes handled, without the dot"
    )

    @field_validator("extensions")
    @classmethod
    def strip_leading_dots(cls, v: list[str]) -> list[str]:
        """Accept both 'scss' and '.scss'."""
        cleaned = [ext.lstrip(".") for ext in v]
        if any(not ext.strip() for ext in cleaned):
            raise ValueError("extensions cannot be empty strings")
        return cleaned

    def suffixes(self, tag: str) -> list[str]:
        """Suffixes matched for this linter, falling back to its group tag."""
        return self.extensions or [tag]

    model_config = {"frozen": True}


DEFAULT_LINTERS: dict[str, LinterConfig] = {
    "rb": LinterConfig(
        bin="rubocop",
        opts="--format simple -D",
        autocorrect_opt="-a",
        installer="gem install rubocop",
    ),
    "js": LinterConfig(
        bin="jshint",
        installer="brew install node; npm install -g jshint",
    ),
    "haml": LinterConfig(
        bin="haml-lint",
        installer="gem install haml-lint",
    ),
    "scss": LinterConfig(
        bin="scss-lint",
        installer="gem install scss_lint",
        extensions=["scss", "sass"],
    ),
}


class Config(BaseModel):
    """Project configuration loaded from .stylecheck.json."""

    linters: dict[str, LinterConfig] = Field(
        default_factory=lambda: dict(DEFAULT_LINTERS), description="Linters keyed by group tag"
    )
    git_installer: str = Field(default=GIT_INSTALLER, description="Command that installs git")
    show_progress: bool = Field(default=True, description="Show a spinner while linters run")

    @field_validator("linters")
    @classmethod
    def validate_tags(cls, v: dict[str, LinterConfig]) -> dict[str, LinterConfig]:
        """Ensure group tags are usable as file suffixes."""
        for tag in v:
            if not tag.strip() or tag.startswith("."):
                raise ValueError(f"invalid linter tag: {tag!r}")
        return v


class RunOptions(BaseModel):
    """Options for a single run, built once from the command line."""

    verbose: bool = False
    test: bool = False
    file_type: str | None = None
    check_branch: bool = False
    vs_branch: str = MAIN_BRANCH
    autocorrect: bool = False
    run_installer: bool = False
    lines_only: bool = False

    model_config = {"frozen": True}

    @property
    def reporting(self) -> bool:
        """Whether progress notes (headers, counts, missing tools) are printed."""
        return self.verbose or self.test


def get_default_config() -> Config:
    """Return default configuration.

    Returns:
        Config with the built-in linter table
    """
    return Config()


def _linter_data(data: dict[str, Any]) -> dict[str, Any]:
    """Normalize one linter entry, accepting camelCase keys."""
    normalized = dict(data)
    if "autocorrectOpt" in normalized and "autocorrect_opt" not in normalized:
        normalized["autocorrect_opt"] = normalized.pop("autocorrectOpt")
    return normalized


def load_config(config_path: Path) -> Config:
    """Load configuration from file or return defaults.

    Linter entries in the file override the built-in entry with the same tag
    field by field, and new tags are appended. Supports both snake_case
    (preferred) and camelCase keys.

    Args:
        config_path: Path to .stylecheck.json file

    Returns:
        Config object with loaded or default values

    Raises:
        ValueError: If the file is not valid JSON or values are invalid
    """
    if not config_path.exists():
        return get_default_config()

    try:
        with config_path.open(encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Configuration in {config_path} must be a JSON object")

    defaults = get_default_config()

    linters: dict[str, Any] = {
        tag: linter.model_dump() for tag, linter in defaults.linters.items()
    }
    file_linters = data.get("linters", {})
    if not isinstance(file_linters, dict):
        raise ValueError(f"'linters' in {config_path} must be a JSON object")

    for tag, entry in file_linters.items():
        if not isinstance(entry, dict):
            raise ValueError(f"Linter '{tag}' must be a JSON object")
        linters[tag] = {**linters.get(tag, {}), **_linter_data(entry)}

    config_data = {
        "linters": linters,
        "git_installer": data.get(
            "git_installer", data.get("gitInstaller", defaults.git_installer)
        ),
        "show_progress": data.get(
            "show_progress", data.get("showProgress", defaults.show_progress)
        ),
    }

    try:
        return Config(**config_data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration in {config_path}: {e}") from e
