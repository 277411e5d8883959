"""Observer pattern for lint results."""

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from .formatter import format_plain, format_report
from .models import LintReport


class LintObserver(ABC):
    """Abstract base class for lint observers."""

    @abstractmethod
    async def on_report(self, report: LintReport) -> None:
        """Called when a message has been linted."""
        pass

    @abstractmethod
    async def on_summary(self, reports: List[LintReport]) -> None:
        """Called when a batch of messages has been linted."""
        pass


class ConsoleLogObserver(LintObserver):
    """Observer that prints lint results to the console."""

    def __init__(
        self,
        console: Optional[Console] = None,
        verbose: bool = False,
        quiet: bool = False,
        help_url: Optional[str] = None,
    ):
        self.console = console or Console()
        self.verbose = verbose
        self.quiet = quiet
        self.help_url = help_url

    async def on_report(self, report: LintReport) -> None:
        if self.quiet:
            return
        for line in format_report(report, verbose=self.verbose, help_url=self.help_url):
            self.console.print(line)

    async def on_summary(self, reports: List[LintReport]) -> None:
        if self.quiet or len(reports) < 2:
            return
        failed = sum(1 for report in reports if not report.valid)
        if failed:
            self.console.print(f"\n[red]{failed} of {len(reports)} commits failed linting[/red]")
        else:
            self.console.print(f"\n[green]All {len(reports)} commits passed linting[/green]")


class FileLogObserver(LintObserver):
    """Observer that appends lint results to a log file."""

    def __init__(self, log_file: str):
        self.log_file = Path(log_file)
        # Ensure the parent directory exists
        self.log_file.parent.mkdir(parents=True, exist_ok=True)

    async def _log(self, message: str) -> None:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with self.log_file.open("a", encoding="utf-8") as f:
            f.write(f"{timestamp} - {message}\n")

    async def on_report(self, report: LintReport) -> None:
        for line in format_plain(report):
            await self._log(line)

    async def on_summary(self, reports: List[LintReport]) -> None:
        failed = sum(1 for report in reports if not report.valid)
        await self._log(f"Linted {len(reports)} commits, {failed} failed")
