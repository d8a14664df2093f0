"""Rich formatting utilities for the CLI.

Keeps all Rich rendering (tables, panels, syntax) in one module that knows
nothing about how warnings are produced.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
    from dashboard_linter.domain.models.report import CheckOutcome
    from dashboard_linter.domain.models.rule import Rule

console = Console()
err_console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Success / error panels
# ---------------------------------------------------------------------------


def success_panel(message: str, title: str = "Dashboard Linter") -> None:
    """Print a green success panel."""
    console.print(Panel(message, title=title, border_style="green"))


def error_message(message: str) -> None:
    """Print a red error message on stderr."""
    err_console.print(f"[bold red]❌ {message}[/]", highlight=False)


# ---------------------------------------------------------------------------
# JSON / config rendering
# ---------------------------------------------------------------------------


def json_panel(raw_json: str, title: str = "⚙️  Active configuration") -> None:
    """Render JSON inside a syntax-highlighted panel."""
    console.print(
        Panel(
            Syntax(raw_json, "json", theme="monokai", line_numbers=True),
            title=title,
            border_style="blue",
        )
    )


# ---------------------------------------------------------------------------
# Rule table
# ---------------------------------------------------------------------------


def rules_table(rules: Iterable[Rule]) -> None:
    """Print the active line rules in evaluation order."""
    table = Table(title="📐 Dashboard rules", show_header=True, border_style="blue")
    table.add_column("#", width=3)
    table.add_column("Pattern", style="cyan")
    table.add_column("Warning", style="yellow")

    for index, rule in enumerate(rules, start=1):
        table.add_row(str(index), Text(rule.pattern.pattern), Text(rule.message))

    console.print(table)


# ---------------------------------------------------------------------------
# Warning report
# ---------------------------------------------------------------------------


def warnings_table(outcome: CheckOutcome) -> None:
    """Print found warnings plus a summary panel."""
    if outcome.has_warnings:
        table = Table(title="⚠️  Dashboard warnings", show_header=True, border_style="yellow")
        table.add_column("Warning", style="yellow")
        table.add_column("Filepath", style="cyan")
        for entry in outcome.entries:
            table.add_row(Text(entry.warning), Text(entry.filename))
        console.print(table)

    color = "yellow" if outcome.has_warnings else "green"
    console.print(
        Panel(
            f"Files checked: [bold]{len(outcome.files_checked)}[/]\n"
            f"Warnings: [bold {color}]{len(outcome.entries)}[/]",
            title="📊 Summary",
            border_style=color,
        )
    )
