"""Console reporter: StateCheckResult → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from statetypes.domain.model.state_check import StateCheckResult


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        color: Emit ANSI styles. False for logs and tests.
        width: Console width in columns.
        show_messages: Print full failure messages under the table.
    """

    color: bool = True
    width: int = 120
    show_messages: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width <= 0:
            raise ValueError(f"width must be > 0, got {self.width}")


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, result: StateCheckResult) -> str:
        """Format state check result as rich formatted string.

        Args:
            result: State check result to format.

        Returns:
            Formatted string with colors and tables.
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            color_system="standard" if self._config.color else None,
            width=self._config.width,
        )

        self._render_header(console, result)

        if result.failures:
            self._render_failures(console, result)

        return output.getvalue()

    def _render_header(self, console: Console, result: StateCheckResult) -> None:
        """Render header with summary."""
        console.print()
        console.rule("[bold]STATE CHECK[/bold]")
        console.print()

        status = "[green]PASS[/green]" if result.passed else "[bold red]FAIL[/bold red]"
        console.print(
            f"[bold]Checked:[/bold] {len(result.checked)}  "
            f"[bold]Failures:[/bold] {result.failure_count}  {status}"
        )
        console.print()

    def _render_failures(self, console: Console, result: StateCheckResult) -> None:
        """Render failures table, then full messages."""
        table = Table(show_header=True, header_style="bold", box=None)
        table.add_column("State", style="cyan")
        table.add_column("Expected", style="yellow")

        for failure in result.failures:
            table.add_row(escape(failure.name), escape(failure.expected))

        console.print(table)
        console.print()

        if not self._config.show_messages:
            return

        for failure in result.failures:
            console.print(
                f"[red]{escape(failure.name)}[/red]: {escape(failure.message.rstrip())}",
                soft_wrap=True,
            )

        console.print()
