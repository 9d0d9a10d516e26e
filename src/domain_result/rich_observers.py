"""Rich-based output for result events and error reports.

Provides a Rich observer that prints one line per result event, plus helpers
for rendering a Result's errors as a table.

Requires the 'rich' package: pip install rich
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from domain_result.events import ResultEvent, ResultEventType, ResultObserver

if TYPE_CHECKING:
    from collections.abc import Iterable

    from rich.console import Console
    from rich.table import Table

    from domain_result.errors import ErrorEntry
    from domain_result.results import Result

__all__ = ["RichEventLogObserver", "build_errors_table", "print_errors"]


class RichEventLogObserver(ResultObserver):
    """Print result events to a Rich console as they happen.

    Example:
        observer = RichEventLogObserver()
        result = result_for(Order, observers=[observer])
        result.ensure(lambda: order_id, "Order id is required")
        # ✗ ensure: Order id is required (actual: None)
        # ⏹ short-circuited after: Order id is required

    Requires:
        pip install rich
    """

    def __init__(
        self,
        console: Console | None = None,
        show_values: bool = True,
        max_message_length: int = 80,
    ) -> None:
        """Initialize the observer.

        Args:
            console: Rich Console instance. If None, creates a new one.
            show_values: Whether to print actual values and materialized values.
            max_message_length: Messages longer than this are truncated.
        """
        # Import Rich components here to make them optional
        from rich.console import Console

        self._console = console or Console()
        self._show_values = show_values
        self._max_message_length = max_message_length

    def on_event(self, event: ResultEvent) -> None:
        """Print a line describing the event.

        Args:
            event: The result event to handle.
        """
        line = self._format(event)
        if line:
            self._console.print(line, highlight=False)

    def _format(self, event: ResultEvent) -> str | None:
        data = event.data

        if event.event_type == ResultEventType.ERROR_ADDED:
            line = f"[red]✗ {data.get('step')}[/]: {self._truncate(data.get('message', ''))}"
            if self._show_values:
                line += f" [dim](actual: {_escape(data.get('actual_value'))})[/]"
            return line

        if event.event_type == ResultEventType.SHORT_CIRCUITED:
            return f"[yellow]⏹ short-circuited after[/]: {self._truncate(data.get('message', ''))}"

        if event.event_type == ResultEventType.CHECK_SKIPPED:
            return f"[dim]↷ {data.get('step')} skipped ({data.get('skipped', 0)} check(s))[/]"

        if event.event_type == ResultEventType.RESULTS_COMBINED:
            return (
                f"[blue]⊕ combined[/] {data.get('result_count', 0)} result(s), "
                f"{data.get('error_count', 0)} error(s)"
            )

        if event.event_type == ResultEventType.VALUE_MATERIALIZED:
            line = "[green]✓ value materialized[/]"
            if self._show_values:
                line += f" [dim]{_escape(data.get('value'))}[/]"
            return line

        if event.event_type == ResultEventType.SUCCESS_SKIPPED:
            return f"[red]✗ success skipped[/] ({data.get('error_count', 0)} error(s))"

        return None

    def _truncate(self, message: str) -> str:
        if len(message) > self._max_message_length:
            message = message[: self._max_message_length] + "..."
        return _escape(message)


def _escape(value: Any) -> str:
    from rich.markup import escape

    return escape(repr(value) if not isinstance(value, str) else value)


def build_errors_table(errors: Iterable[ErrorEntry], title: str = "Validation Errors") -> Table:
    """Build a Rich table with one row per error entry.

    Args:
        errors: Error entries to display, in order.
        title: Table title.

    Returns:
        Rich Table with index, message and actual value columns.
    """
    from rich.markup import escape
    from rich.table import Table

    table = Table(
        title=title,
        show_header=True,
        header_style="bold magenta",
        expand=True,
    )
    table.add_column("#", justify="right", style="dim", width=4)
    table.add_column("Error", style="yellow")
    table.add_column("Actual Value", style="cyan")

    rows = 0
    for rows, entry in enumerate(errors, start=1):
        actual = "-" if entry.actual_value is None else escape(str(entry.actual_value))
        table.add_row(str(rows), escape(entry.message), actual)

    if rows == 0:
        table.add_row("-", "No errors", "-")

    return table


def print_errors(result: Result[Any], console: Console | None = None) -> None:
    """Print a Result's errors as a table, or a success line if there are none.

    Args:
        result: The Result to display.
        console: Rich Console instance. If None, creates a new one.
    """
    from rich.console import Console

    console = console or Console()
    report = result.report()
    label = report.target or "result"

    if not report.has_errors:
        console.print(f"[green]✓ {label}: no errors[/]")
        return

    title = f"{label}: {len(report.errors)} error(s)"
    if report.short_circuited:
        title += " (short-circuited)"
    console.print(build_errors_table(report.errors, title=title))
