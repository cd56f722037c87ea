"""Restrict linter output to changed lines."""
import re

from stylecheck.types import Diagnostic

# "<severity>:<line>:<message>", e.g. rubocop's simple format "C:  3:  5: ..."
DIAGNOSTIC_RE = re.compile(r"^([CW]):\s*(\d+):\s*(.*)$")


def parse_diagnostic(line: str) -> Diagnostic | None:
    """Parse one diagnostic line.

    Args:
        line: Raw linter output line

    Returns:
        Diagnostic, or None if the line is not a recognized diagnostic
    """
    match = DIAGNOSTIC_RE.match(line)
    if not match:
        return None
    return {
        "severity": match.group(1),
        "line": int(match.group(2)),
        "message": match.group(3),
    }


def filter_diagnostics(output: str, changed_lines: set[int]) -> list[str]:
    """Keep the diagnostic lines whose line number was changed.

    Args:
        output: Raw linter output, one diagnostic per line
        changed_lines: Line numbers considered changed

    Returns:
        Matching raw lines in their original order
    """
    kept = []
    for line in output.splitlines():
        diagnostic = parse_diagnostic(line)
        if diagnostic is not None and diagnostic["line"] in changed_lines:
            kept.append(line)
    return kept


def format_file_header(file_path: str) -> str:
    """Header line introducing one file's filtered diagnostics."""
    return f"== {file_path} =="


def filter_output(file_path: str, output: str, changed_lines: set[int]) -> str:
    """Filter one file's linter output down to its changed lines.

    Args:
        file_path: File the output belongs to
        output: Raw linter output
        changed_lines: Line numbers considered changed

    Returns:
        Header plus surviving diagnostics, or an empty string if none survive
    """
    kept = filter_diagnostics(output, changed_lines)
    if not kept:
        return ""
    return "\n".join([format_file_header(file_path), *kept])
