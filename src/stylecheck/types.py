"""Type definitions for stylecheck."""
from typing import TypedDict


class Diagnostic(TypedDict):
    """Single linter diagnostic line."""

    severity: str
    line: int
    message: str
