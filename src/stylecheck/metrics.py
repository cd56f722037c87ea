"""Run metrics tracking."""
import time
from dataclasses import dataclass, field


@dataclass
class RunMetrics:
    """Metrics collected during a run."""

    # Timing
    start_time: float = field(default_factory=time.time)
    end_time: float | None = None

    # Files
    files_collected: int = 0
    files_linted: int = 0

    # Linters
    linters_run: int = 0
    linters_missing: int = 0
    installers_run: int = 0

    def finish(self) -> None:
        """Mark run as finished."""
        self.end_time = time.time()

    @property
    def elapsed_seconds(self) -> float:
        """Get elapsed time in seconds."""
        end = self.end_time or time.time()
        return end - self.start_time

    def summary(self) -> str:
        """One-line human readable summary."""
        return (
            f"Linted {self.files_linted} of {self.files_collected} changed file(s) "
            f"with {self.linters_run} linter(s) in {self.elapsed_seconds:.2f}s "
            f"({self.linters_missing} missing, {self.installers_run} installed)"
        )
