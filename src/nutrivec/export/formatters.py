"""Output formatters for match and comparison results."""

from __future__ import annotations

from typing import Any, Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from nutrivec.engine.expression import serialize_expression
from nutrivec.engine.models import CatalogItem, Match, Sign, SignedEntry
from nutrivec.explore.compare import NutrientRow


def selection_to_dict(selection: Sequence[SignedEntry]) -> list[dict[str, str]]:
    """Format a signed selection for JSON output."""
    return [{"name": e.item.name, "sign": e.sign.symbol} for e in selection]


def match_to_dict(match: Optional[Match]) -> Optional[dict[str, Any]]:
    """Format a match for JSON output (None when there is no match)."""
    if match is None:
        return None
    return {"name": match.name, "similarity": round(match.similarity, 6)}


class TableFormatter:
    """Format results as Rich tables for terminal display."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize the formatter.

        Args:
            console: Rich console for output. If None, creates a new one.
        """
        self.console = console or Console()

    def selection(self, selection: Sequence[SignedEntry]) -> None:
        """Print the signed selection, one item per line."""
        if not selection:
            self.console.print("[dim]No foods selected.[/dim]")
            return

        table = Table(title="Selected Foods")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Op", justify="center")
        table.add_column("Food", style="cyan")
        for i, entry in enumerate(selection, 1):
            color = "green" if entry.sign is Sign.PLUS else "red"
            table.add_row(str(i), f"[{color}]{entry.sign.symbol}[/{color}]", escape(entry.item.name))
        self.console.print(table)

    def match(
        self,
        selection: Sequence[SignedEntry],
        best: Optional[Match],
        ranked: Optional[list[Match]] = None,
    ) -> None:
        """Print the closest food and, optionally, the ranked runners-up."""
        self.selection(selection)

        if best is None:
            self.console.print("[yellow]No result yet.[/yellow]")
            return

        expression = serialize_expression(selection)
        self.console.print(
            Panel(
                f"[bold]{escape(best.name)}[/bold]\nSimilarity: {best.similarity:.4f}",
                title=f"Closest food to {escape(expression)}",
            )
        )

        if ranked:
            table = Table(title="Top Matches")
            table.add_column("Rank", justify="right", style="dim")
            table.add_column("Food", style="cyan")
            table.add_column("Similarity", justify="right")
            for i, m in enumerate(ranked, 1):
                table.add_row(str(i), escape(m.name), f"{m.similarity:.4f}")
            self.console.print(table)

    def comparison(self, subjects: Sequence[str], rows: list[NutrientRow]) -> None:
        """Print the normalized nutrient comparison matrix."""
        if not subjects:
            self.console.print("[yellow]No foods to compare.[/yellow]")
            return
        if not rows:
            self.console.print("[yellow]No nutrient data for the compared foods.[/yellow]")
            return

        table = Table(title=f"Nutrient Comparison (top {len(rows)} by spread)")
        table.add_column("Nutrient")
        for name in subjects:
            table.add_column(escape(name[:30]), justify="right")

        for row in rows:
            table.add_row(escape(row.nutrient_name), *(f"{row.values[n]:.2f}" for n in subjects))

        self.console.print(table)
        self.console.print(
            "[dim]Values are scaled so the largest amount among the compared "
            "foods is 1.00; adding or removing foods changes the scale.[/dim]"
        )

    def search(self, query: str, items: list[CatalogItem]) -> None:
        """Print catalog search results."""
        if not items:
            self.console.print(f"[yellow]No foods matching '{escape(query)}'[/yellow]")
            return

        table = Table(title=f"Foods matching '{escape(query)}'")
        table.add_column("Food", style="cyan")
        for item in items:
            table.add_row(escape(item.name))
        self.console.print(table)
