"""
Terminal display for the CVE Record codec tools.

A walk over a full cvelistV5 checkout decodes a quarter of a million files, so
the processor shows a live progress bar with running per-state counts and the
latest decode failures instead of one log line per file.
"""

from collections import Counter
from typing import List, Optional
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.console import Console, Group
from rich.markup import escape
from rich.progress import Progress, TextColumn, BarColumn, TimeRemainingColumn, TaskProgressColumn
from cverecord.utils.logger import Logger

# Failures shown in the status panel while the walk runs
RECENT_FAILURES = 3
# Failures repeated in the summary after the walk
REPORTED_FAILURES = 10


class ProgressUI:
    """Live progress of a corpus walk: bar, state counts and recent failures."""

    def __init__(self, total: int, description: str = "Decoding", enabled: bool = True):
        """
        Initialize the progress UI.

        Args:
            total: Number of record files to decode
            description: Label of the progress bar
            enabled: Show the live display; when False failures are only collected
        """
        self.enabled = enabled
        self.current_file = ""
        self.counts: Counter = Counter()
        self.failures: List[str] = []

        self.progress = Progress(
            TextColumn("[bold blue]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            TimeRemainingColumn(),
        )
        self.task = self.progress.add_task(description, total=total)

        self.console = Console(stderr=True)
        self.live = Live(self._render(), console=self.console, refresh_per_second=4, transient=True)

    def _status_panel(self) -> Panel:
        counts = "  ".join(f"{state}: {count}" for state, count in sorted(self.counts.items())) or "-"
        lines = [f"File: {escape(self.current_file)}", f"Records: {escape(counts)}"]
        if self.failures:
            lines.append("Recent failures:")
            lines.extend(f"• {escape(failure)}" for failure in self.failures[-RECENT_FAILURES:])
        return Panel("\n".join(lines), title="Status", border_style="yellow")

    def _render(self) -> Group:
        return Group(self.progress, self._status_panel())

    def _refresh(self) -> None:
        if self.enabled:
            self.live.update(self._render())

    def __enter__(self):
        if self.enabled:
            self.live.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.enabled:
            self.live.__exit__(exc_type, exc_val, exc_tb)

        if self.failures:
            Logger.warning(f"{len(self.failures)} decode failures:")
            for message in self.failures[:REPORTED_FAILURES]:
                Logger.warning(message)
            if len(self.failures) > REPORTED_FAILURES:
                Logger.info(f"... and {len(self.failures) - REPORTED_FAILURES} more (see log file or report)")

    def record(self, file_name: str, state: Optional[str]) -> None:
        """
        Count one decoded file.

        Args:
            file_name: Name of the file just processed
            state: State of the decoded record, None if it failed
        """
        self.current_file = file_name
        self.counts[state or "FAILED"] += 1
        self.progress.update(self.task, advance=1)
        self._refresh()

    def log_failure(self, message: str) -> None:
        """Remember a decode failure for the panel and the closing summary."""
        self.failures.append(message)
        Logger.debug(message)
        self._refresh()


def print_table(title: str, rows: List[tuple], columns: tuple = ("Field", "Value")) -> None:
    """
    Print rows as a rich table on stderr.

    Args:
        title: Table title
        rows: One tuple of cell values per row
        columns: Column headers
    """
    table = Table(title=title)
    for column in columns:
        table.add_column(column)
    for row in rows:
        table.add_row(*(escape(str(cell)) for cell in row))
    Console(stderr=True).print(table)
