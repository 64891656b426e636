"""Rich console helpers shared by the pipeline and CLI.

The resolution core never prints.  Everything user-facing goes through the
single ``console`` defined here so output can be captured or silenced in one
place.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from rich.console import Console
from rich.rule import Rule
from rich.table import Table

if TYPE_CHECKING:
    from kickoff.recommender.models import ScoredOption

console = Console()

# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------


def format_duration(seconds: float) -> str:
    """Format a duration in seconds for display.

    Examples::

        format_duration(0.042) -> "42ms"
        format_duration(3.7)   -> "3.7s"
        format_duration(65.2)  -> "1m 5s"
    """
    if seconds < 0:
        return "0ms"
    if seconds < 1:
        return f"{int(seconds * 1000)}ms"
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes = int(seconds // 60)
    return f"{minutes}m {int(seconds % 60)}s"


# ---------------------------------------------------------------------------
# Stage headers
# ---------------------------------------------------------------------------


STAGE_NAMES: dict[int, str] = {
    1: "VALIDATE",
    2: "RECOMMEND",
    3: "PLAN",
}

STAGE_COLORS: dict[int, str] = {
    1: "bright_cyan",
    2: "bright_green",
    3: "bright_magenta",
}


def print_stage_header(stage: int, name: str) -> None:
    """Print a full-width rule naming the pipeline stage.

    Args:
        stage: Stage number (1-3).
        name: Stage display name.
    """
    color = STAGE_COLORS.get(stage, "white")
    console.print()
    console.print(
        Rule(
            f"[bold {color}] Stage {stage}: {name.upper()} [/bold {color}]",
            style=color,
        )
    )
    console.print()


# ---------------------------------------------------------------------------
# Tables and messages
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_ranking_table(ranked: Sequence[ScoredOption], title: str = "Ranking") -> None:
    """Print ranked options with their score, complexity and top reason."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right", no_wrap=True)
    table.add_column("Option", no_wrap=True)
    table.add_column("Score", justify="right")
    table.add_column("Complexity")
    table.add_column("Why")

    for scored in ranked:
        top_reason = scored.reasoning[0].explanation if scored.reasoning else ""
        table.add_row(
            str(scored.rank),
            scored.option.name,
            f"{scored.score:.1f}",
            scored.option.complexity.value,
            top_reason,
        )

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
