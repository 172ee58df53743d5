# appresync Console Output
# Rich-based console output for the resync flow

from rich.console import Console as RichConsole
from rich.panel import Panel
from rich.table import Table

from appresync.config.schema import AppresyncConfig
from appresync.output.failure import render_failure
from appresync.sync.models import ResyncOutcome, ResyncRequest, Success
from appresync.sync.view import APP_ID_DOCS, OVERRIDE_WARNING, PLATFORM_BANNER, VERCEL_URLS_DOCS, ModalView


class Console:
    """
    Console output manager using Rich.

    Renders the resync modal view, requests and outcomes.
    """

    def __init__(self, *, verbose: bool = False, colored: bool = True):
        """
        Initialize console.

        Args:
            verbose: Enable verbose output.
            colored: Enable colored output.
        """
        self.verbose = verbose
        self._console = RichConsole(force_terminal=colored, no_color=not colored)

    @property
    def rich(self) -> RichConsole:
        """Underlying Rich console."""
        return self._console

    def print(self, *args, **kwargs) -> None:
        """Print to console."""
        self._console.print(*args, **kwargs)

    def print_error(self, message: str) -> None:
        """Print error message."""
        self._console.print(f"[red]Error:[/red] {message}")

    def print_warning(self, message: str) -> None:
        """Print warning message."""
        self._console.print(f"[yellow]Warning:[/yellow] {message}")

    def print_success(self, message: str) -> None:
        """Print success message."""
        self._console.print(f"[green]{message}[/green]")

    def print_info(self, message: str) -> None:
        """Print info message."""
        self._console.print(f"[blue]{message}[/blue]")

    def print_view(self, view: ModalView) -> None:
        """
        Print the resync modal.

        Args:
            view: Modal view to display.
        """
        lines = [view.description, ""]

        if view.show_platform_banner:
            lines.append(f"[blue]ℹ {PLATFORM_BANNER}[/blue]")
            lines.append(f"[dim]{VERCEL_URLS_DOCS}[/dim]")
            lines.append("")

        lines.append("The URL where you serve Inngest functions:")
        url = view.input_value or f"[dim]{view.input_placeholder}[/dim]"
        lock = " [dim](read-only)[/dim]" if view.input_read_only else ""
        lines.append(f"  [cyan]{url}[/cyan]{lock}")

        override = "[green]on[/green]" if view.switch_checked else "[dim]off[/dim]"
        lines.append(f"Override input: {override}")

        if view.show_override_warning:
            lines.append(f"[yellow]{OVERRIDE_WARNING}[/yellow]")
            lines.append(f"[dim]{APP_ID_DOCS}[/dim]")

        if view.confirm_disabled and not view.cancel_disabled:
            lines.append("")
            lines.append(f"[dim]{view.confirm_label} is unavailable until an override URL is set.[/dim]")

        self._console.print(Panel("\n".join(lines), title=f"⟳ {view.title}", border_style="blue"))

        if view.failure is not None:
            self._console.print(render_failure(view.failure))

    def print_request(self, request: ResyncRequest) -> None:
        """Print the request about to be sent (verbose only)."""
        if not self.verbose:
            return

        table = Table(show_header=False, box=None)
        table.add_column("Field", style="dim")
        table.add_column("Value", style="cyan")
        table.add_row("App", request.app_external_id)
        table.add_row("URL", request.app_url or "-")
        table.add_row("Environment", str(request.env_id))
        self._console.print(table)

    def print_outcome(self, outcome: ResyncOutcome) -> None:
        """Print the outcome of a resync."""
        if isinstance(outcome, Success):
            if self.verbose:
                self._console.print(f"[dim]App ID: {outcome.app_id}[/dim]")
            return

        self._console.print(render_failure(outcome.error))
        if self.verbose and getattr(outcome, "cause", None):
            self._console.print(f"[dim]Cause: {outcome.cause}[/dim]")

    def print_config_summary(self, config_path: str, config: AppresyncConfig) -> None:
        """Print configuration summary."""
        token = "set" if config.api.token else "not set"
        self._console.print(
            Panel(
                f"Config: {config_path}\n"
                f"Endpoint: {config.api.endpoint}\n"
                f"Token: {token}\n"
                f"Environment: {config.environment.slug} ({config.environment.id or 'not set'})",
                title="appresync Configuration",
                border_style="blue",
            )
        )


def create_console(*, verbose: bool = False, colored: bool = True) -> Console:
    """
    Create a console instance.

    Args:
        verbose: Enable verbose output.
        colored: Enable colored output.

    Returns:
        Console instance.
    """
    return Console(verbose=verbose, colored=colored)
