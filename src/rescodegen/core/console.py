"""User-facing console output for CLI commands.

Usage::

    from rescodegen.core.console import status

    status("Parsed spec.res", style="success")  # ✓ Parsed spec.res
    status("2 diagnostics", style="error")      # ✗ 2 diagnostics
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from structlog.stdlib import BoundLogger

    from rescodegen.parser.models import ErrorRecord

# Console for output; stdout is reserved for JSON
_console = Console(stderr=True)

# Style prefixes
_STYLES = {
    "success": "[green]✓[/green] ",
    "error": "[red]✗[/red] ",
    "warning": "[yellow]![/yellow] ",
    "info": "  ",
    "none": "",
}


def _get_logger() -> BoundLogger:
    from rescodegen.core.logging import get_logger

    return get_logger("console")


def get_console() -> Console:
    """Get the shared Rich console instance."""
    return _console


def status(message: str, *, style: str = "info", indent: int = 0) -> None:
    """Print a styled status message to stderr."""
    prefix = _STYLES.get(style, "")
    padding = " " * indent
    _console.print(f"{padding}{prefix}{message}", highlight=False)

    _get_logger().debug("status", message=message, style=style)


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    """Return grammatically correct singular/plural form.

    Args:
        count: The number of items
        singular: Singular form (e.g., "declaration")
        plural: Plural form (default: singular + "s")

    Returns:
        Formatted string like "1 declaration" or "3 declarations"
    """
    if plural is None:
        plural = singular + "s"
    word = singular if count == 1 else plural
    return f"{count} {word}"


def make_diagnostics_table(errors: Sequence[ErrorRecord]) -> Table:
    """Create a Rich Table listing diagnostics by position."""
    table = Table(show_header=True, box=None, padding=(0, 1), pad_edge=False)
    table.add_column("line", justify="right", style="cyan")
    table.add_column("col", justify="right", style="cyan")
    table.add_column("message")

    for error in sorted(errors, key=lambda e: (e.line, e.column)):
        table.add_row(str(error.line), str(error.column), error.message)

    return table
