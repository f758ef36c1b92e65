"""Console output for validation results."""

from rich.console import Console
from rich.markup import escape

from rulecheck.validation import ValidationResult

_console = Console()


def success(message: str, console: Console | None = None) -> None:
    """Print a success message with green checkmark."""
    (console or _console).print(f"[green]✓[/green] {message}")


def error(message: str, console: Console | None = None) -> None:
    """Print an error message with red X."""
    (console or _console).print(f"[red]✗[/red] {message}")


def dim(message: str, console: Console | None = None) -> None:
    """Print a dimmed message (for secondary info)."""
    (console or _console).print(f"[dim]{message}[/dim]")


def print_result(
    result: ValidationResult,
    subject: str | None = None,
    console: Console | None = None,
) -> None:
    """Print a validation result.

    Valid results print a single success line. Invalid results print an
    error header followed by one bullet per error, in order.

    Args:
        result: The result to render.
        subject: Optional name of the validated value, used in the header.
        console: Console to print to. Defaults to a shared stdout console.
    """
    label = f"'{escape(subject)}'" if subject else "Value"
    if result.is_valid:
        success(f"{label} is valid", console)
        return

    count = len(result.validation_errors)
    noun = "error" if count == 1 else "errors"
    error(f"{label} failed validation ({count} {noun}):", console)
    for validation_error in result.validation_errors:
        dim(f"  • {escape(str(validation_error.message))}", console)
