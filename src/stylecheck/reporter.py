"""Formatting of the messages stylecheck prints alongside linter output."""
import shlex


def format_command(cmd: list[str]) -> str:
    """Render an argument list as a shell command line."""
    return shlex.join(cmd)


def format_test_command(cmd: list[str]) -> str:
    """Line printed in test mode instead of running a command."""
    return f"[CMD] {format_command(cmd)}"


def format_linter_header(bin_name: str) -> str:
    """Linter name underlined with dashes, preceded by a blank line."""
    return f"\n{bin_name}\n{'-' * len(bin_name)}"


def format_match_count(tag: str, count: int) -> str:
    return f"Found {count} {tag} file(s)"


def format_matched_files(files: list[str]) -> str:
    return "\n".join(files) + "\n"


def format_missing_linter(bin_name: str, installer: str) -> str:
    return f"{bin_name} not found, run '{installer}'"


def format_missing_git(installer: str) -> str:
    return f"git is not installed, please run '{installer}'"
