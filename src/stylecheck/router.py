"""Route changed files to linters by extension."""
import re

from stylecheck.config import LinterConfig, RunOptions


def suffix_pattern(suffixes: list[str]) -> re.Pattern[str]:
    """Compile a case-sensitive, end-anchored pattern for the given suffixes."""
    alternatives = "|".join(re.escape(suffix) for suffix in suffixes)
    return re.compile(rf"\.(?:{alternatives})$")


def match_files(tag: str, linter: LinterConfig, files: list[str]) -> list[str]:
    """Select the files a linter group handles.

    Args:
        tag: Group tag, used as the suffix when the linter lists none
        linter: Linter descriptor
        files: Candidate file paths

    Returns:
        Matching files in input order
    """
    pattern = suffix_pattern(linter.suffixes(tag))
    return [f for f in files if pattern.search(f)]


def selected_linters(
    linters: dict[str, LinterConfig], options: RunOptions
) -> dict[str, LinterConfig]:
    """Linter groups enabled by the file-type filter."""
    if options.file_type is None:
        return dict(linters)
    return {tag: linter for tag, linter in linters.items() if tag == options.file_type}
