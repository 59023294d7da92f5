"""Rich console UI helpers."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from vincheck.models import ValidationResult

console = Console()


def success_panel(message: str) -> Panel:
    """Create a success message panel."""
    return Panel(
        f"[green]\u2713[/green] {message}",
        border_style="green",
        padding=(0, 1),
    )


def error_panel(message: str, details: str | None = None) -> Panel:
    """Create an error message panel."""
    content = f"[red]\u2717[/red] {message}"
    if details:
        content += f"\n\n[dim]{details}[/dim]"
    return Panel(
        content,
        title="Error",
        border_style="red",
        padding=(0, 1),
    )


def highlight_check_digit(vin: str) -> str:
    """Mark up the 9th character of a VIN for display."""
    if len(vin) < 9:
        return escape(vin)
    return f"{escape(vin[:8])}[bold]{escape(vin[8])}[/bold]{escape(vin[9:])}"


def create_result_table(result: ValidationResult) -> Table:
    """Create a table displaying a validation result."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Field", style="dim")
    table.add_column("Value")

    table.add_row("VIN", highlight_check_digit(result.vin) or "(empty)")
    table.add_row("Length", str(len(result.vin)))
    table.add_row("Check digit", escape(result.check_digit) or "N/A")
    table.add_row("Expected", result.expected_check_digit)
    table.add_row("Errors", result.error_summary or "None")

    return table
