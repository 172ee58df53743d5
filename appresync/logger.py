# appresync Resync Log
# Markdown log of resync attempts

from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from rich.console import Console

from appresync.sync.models import ResyncOutcome, ResyncRequest, Success

LOG_HEADER = "# App Resync Log\n\n"


def get_default_log_path() -> Path:
    """Get the default resync log path."""
    return Path.home() / ".config" / "appresync" / "RESYNC_LOG.md"


def format_entry(request: ResyncRequest, outcome: ResyncOutcome, when: Optional[datetime] = None) -> str:
    """
    Format a log entry for a resync attempt.

    Args:
        request: The request that was sent.
        outcome: Its outcome.
        when: Timestamp (defaults to now, UTC).

    Returns:
        Markdown formatted entry.
    """
    when = when or datetime.now(tz=timezone.utc)
    stamp = when.strftime("%Y-%m-%d %H:%M:%S")

    if isinstance(outcome, Success):
        result = f"synced (app {outcome.app_id})"
    else:
        result = f"{outcome.kind.value}: {outcome.error.code}"
        if outcome.error.message:
            result += f" - {outcome.error.message}"

    return f"- {stamp} `{request.app_external_id}` env `{request.env_id}`: {result}\n"


class ResyncLogger:
    """Rich console output for the resync flow."""

    def __init__(self, console: Optional[Console] = None, verbose: bool = False):
        """Initialize logger.

        Args:
            console: Rich Console instance
            verbose: Enable verbose output
        """
        self.console = console or Console()
        self.verbose = verbose

    def info(self, message: str) -> None:
        """Blue info message."""
        self.console.print(f"[blue]ℹ[/blue] {message}")

    def success(self, message: str) -> None:
        """Green success message."""
        self.console.print(f"[green]✓[/green] {message}")

    def warning(self, message: str) -> None:
        """Yellow warning message."""
        self.console.print(f"[yellow]⚠[/yellow] {message}")

    def error(self, message: str) -> None:
        """Red error message."""
        self.console.print(f"[red]✗[/red] {message}")

    def entries(self, lines: list[str]) -> None:
        """Display resync log lines, highlighting failed attempts."""
        for line in lines:
            if line.startswith("# "):
                self.console.print(f"[bold]{line[2:]}[/bold]")
            elif ": synced (" in line:
                self.console.print(line, style="green", markup=False)
            elif line.startswith("- "):
                self.console.print(line, style="red", markup=False)
            else:
                self.console.print(line, markup=False)


class ResyncLog:
    """Markdown resync log, newest entries first."""

    def __init__(self, path: Optional[Path] = None):
        self.path = path or get_default_log_path()

    def append(self, entry: str) -> None:
        """Insert an entry after the header."""
        if self.path.exists():
            existing = self.path.read_text(encoding="utf-8")
            if existing.startswith("# ") and "\n\n" in existing:
                header_end = existing.find("\n\n") + 2
                new_content = existing[:header_end] + entry + existing[header_end:]
            else:
                new_content = entry + existing
        else:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            new_content = LOG_HEADER + entry

        self.path.write_text(new_content, encoding="utf-8")

    def record(self, request: ResyncRequest, outcome: ResyncOutcome) -> None:
        self.append(format_entry(request, outcome))

    def recent(self, count: int = 50) -> list[str]:
        """Return the header followed by the `count` newest entries."""
        if not self.path.exists():
            return []

        content = self.path.read_text(encoding="utf-8")
        header: list[str] = []
        if content.startswith("# ") and "\n\n" in content:
            header_end = content.find("\n\n") + 2
            header = content[:header_end].split("\n")[:-1]
            content = content[header_end:]

        entries = [line for line in content.split("\n") if line]
        return header + entries[:count]
