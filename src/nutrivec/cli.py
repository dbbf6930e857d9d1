"""CLI interface using Typer."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from nutrivec.agent.response import CommandResponse, error_response, success_response
from nutrivec.config import get_settings
from nutrivec.data.loaders import load_catalog, load_nutrients
from nutrivec.engine.expression import (
    parse_expression_report,
    serialize_expression,
    to_query_string,
)
from nutrivec.engine.matching import find_closest_match, rank_matches
from nutrivec.engine.models import Catalog, DimensionMismatchError
from nutrivec.explore.compare import compare_nutrients, comparison_subjects, format_comparison
from nutrivec.explore.search import search_catalog
from nutrivec.export.formatters import TableFormatter, match_to_dict, selection_to_dict
from nutrivec.session.selection import (
    describe_selection,
    merge_selections,
    remove_at,
    toggle_sign,
)

app = typer.Typer(
    help="Food vector arithmetic: add and subtract foods, find the closest one",
    no_args_is_help=True,
)
console = Console()

config_app = typer.Typer(help="Show or write configuration")
app.add_typer(config_app, name="config")

EXPRESSION_HELP = (
    "Expression such as 'Apple+Banana-Milk'. "
    "Put '--' before an expression that starts with '-'."
)


# ============================================================================
# Helpers
# ============================================================================


def output_json(response: CommandResponse) -> None:
    """Print a response envelope as JSON."""
    print(response.to_json())


def use_json(json_flag: bool) -> bool:
    """JSON output if --json was given or config sets output_format: json."""
    return json_flag or get_settings().defaults.output_format == "json"


def _fail(command: str, message: str, json_output: bool, hint: Optional[str] = None) -> None:
    """Report an error and exit with status 1."""
    if json_output:
        output_json(error_response(command, message, [hint] if hint else None))
    else:
        console.print(f"[red]{escape(message)}[/red]")
        if hint:
            console.print(f"[dim]{escape(hint)}[/dim]")
    raise typer.Exit(1)


def _catalog_path(ctx: typer.Context) -> Path:
    override = (ctx.obj or {}).get("catalog")
    return override or get_settings().data.catalog_path


def _nutrients_path(ctx: typer.Context) -> Path:
    override = (ctx.obj or {}).get("nutrients")
    return override or get_settings().data.nutrients_path


def require_catalog(ctx: typer.Context, command: str, json_output: bool) -> Catalog:
    """Load the catalog or exit with a friendly message."""
    path = _catalog_path(ctx)
    try:
        return load_catalog(path)
    except FileNotFoundError:
        _fail(
            command,
            f"Catalog not found: {path}",
            json_output,
            "Pass --catalog <pc_values.json> or set data.catalog_path in config.yaml",
        )
    except ValueError as e:
        _fail(command, f"Invalid catalog {path}: {e}", json_output)


def _warn_unknown(unknown: list[str], json_output: bool) -> list[str]:
    warnings = [f"Unknown food dropped: {name}" for name in unknown]
    if not json_output:
        for w in warnings:
            console.print(f"[yellow]{escape(w)}[/yellow]")
    return warnings


@app.callback()
def main(
    ctx: typer.Context,
    catalog: Optional[Path] = typer.Option(
        None, "--catalog", help="Path to PC values JSON (overrides config)"
    ),
    nutrients: Optional[Path] = typer.Option(
        None, "--nutrients", help="Path to nutrient JSON (overrides config)"
    ),
) -> None:
    """Food vector arithmetic over principal-component coordinates."""
    ctx.obj = {"catalog": catalog, "nutrients": nutrients}


# ============================================================================
# Main Commands
# ============================================================================


@app.command()
def match(
    ctx: typer.Context,
    expression: str = typer.Argument(..., help=EXPRESSION_HELP),
    top: Optional[int] = typer.Option(
        None, "--top", "-n", min=0, help="Also list the N best matches (0 to hide)"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Find the food closest to a combination of foods."""
    json_output = use_json(json_output)
    catalog = require_catalog(ctx, "match", json_output)
    if top is None:
        top = get_settings().match.top_matches

    parsed = parse_expression_report(expression, catalog)
    warnings = _warn_unknown(parsed.unknown_names, json_output)
    selection = parsed.selection

    try:
        best = find_closest_match(selection, catalog)
        ranked = rank_matches(selection, catalog, limit=top) if top > 0 else []
    except DimensionMismatchError as e:
        _fail("match", f"Cannot compute: {e}", json_output)

    if json_output:
        output_json(success_response(
            "match",
            data={
                "expression": serialize_expression(selection),
                "selection": selection_to_dict(selection),
                "match": match_to_dict(best),
                "ranked": [match_to_dict(m) for m in ranked],
            },
            warnings=warnings,
            human_summary=(
                f"Closest food: {best.name}" if best else "No match (empty selection)"
            ),
        ))
        return

    TableFormatter(console).match(selection, best, ranked)


@app.command()
def compare(
    ctx: typer.Context,
    expression: str = typer.Argument(..., help=EXPRESSION_HELP),
    top_nutrients: Optional[int] = typer.Option(
        None, "--top-nutrients", "-k", min=0, help="Number of nutrients to show"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Compare nutrients of the selected foods and their closest match."""
    json_output = use_json(json_output)
    catalog = require_catalog(ctx, "compare", json_output)
    if top_nutrients is None:
        top_nutrients = get_settings().comparison.top_nutrients

    nutrients_path = _nutrients_path(ctx)
    try:
        records = load_nutrients(nutrients_path)
    except FileNotFoundError:
        _fail(
            "compare",
            f"Nutrient data not found: {nutrients_path}",
            json_output,
            "Pass --nutrients <nutrients.json> or set data.nutrients_path in config.yaml",
        )
    except ValueError as e:
        _fail("compare", f"Invalid nutrient data {nutrients_path}: {e}", json_output)

    parsed = parse_expression_report(expression, catalog)
    warnings = _warn_unknown(parsed.unknown_names, json_output)

    try:
        best = find_closest_match(parsed.selection, catalog)
    except DimensionMismatchError as e:
        _fail("compare", f"Cannot compute: {e}", json_output)

    subjects = comparison_subjects(parsed.selection, best.item if best else None)
    rows = compare_nutrients(subjects, records, top_n=top_nutrients)

    if json_output:
        data = format_comparison(subjects, rows)
        data["match"] = match_to_dict(best)
        output_json(success_response(
            "compare",
            data=data,
            warnings=warnings,
            human_summary=f"Comparing {len(subjects)} foods across {len(rows)} nutrients",
        ))
        return

    formatter = TableFormatter(console)
    if best is not None:
        console.print(f"Closest food: [bold]{escape(best.name)}[/bold]")
    formatter.comparison(subjects, rows)


@app.command()
def search(
    ctx: typer.Context,
    query: str = typer.Argument("", help="Part of a food name (case-insensitive)"),
    limit: int = typer.Option(20, "--limit", "-n", min=0, help="Maximum results"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Search the catalog by food name."""
    json_output = use_json(json_output)
    catalog = require_catalog(ctx, "search", json_output)
    results = search_catalog(catalog, query, limit=limit)

    if json_output:
        output_json(success_response(
            "search",
            data={
                "query": query,
                "results": [item.name for item in results],
                "total_matches": len(results),
            },
            human_summary=f"Found {len(results)} foods matching '{query}'",
        ))
        return

    TableFormatter(console).search(query, results)


@app.command()
def link(
    ctx: typer.Context,
    expression: str = typer.Argument(..., help=EXPRESSION_HELP),
    add: Optional[list[str]] = typer.Option(
        None, "--add", help="Append another expression (e.g. '-Milk')"
    ),
    toggle: Optional[list[int]] = typer.Option(
        None, "--toggle", min=1, help="Flip the sign of the item at this position (1-based)"
    ),
    remove: Optional[list[int]] = typer.Option(
        None, "--remove", min=1, help="Drop the item at this position (1-based)"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Edit an expression and print its shareable query string.

    Edits apply in order: --add, then --toggle, then --remove (highest
    position first so earlier positions stay stable).
    """
    json_output = use_json(json_output)
    catalog = require_catalog(ctx, "link", json_output)

    parsed = parse_expression_report(expression, catalog)
    unknown = list(parsed.unknown_names)
    selection = parsed.selection

    for extra in add or []:
        extra_parsed = parse_expression_report(extra, catalog)
        unknown.extend(extra_parsed.unknown_names)
        selection = merge_selections(selection, extra_parsed.selection)

    warnings = _warn_unknown(unknown, json_output)

    try:
        for position in toggle or []:
            selection = toggle_sign(selection, position - 1)
        for position in sorted(set(remove or []), reverse=True):
            selection = remove_at(selection, position - 1)
    except IndexError:
        _fail(
            "link",
            f"Position out of range (selection has {len(selection)} items)",
            json_output,
        )

    normalized = serialize_expression(selection)
    query = to_query_string(selection)

    if json_output:
        output_json(success_response(
            "link",
            data={
                "expression": normalized,
                "query": query,
                "selection": selection_to_dict(selection),
            },
            warnings=warnings,
            human_summary=f"?{query}",
        ))
        return

    for line in describe_selection(selection):
        console.print(line, markup=False, highlight=False)
    console.print(f"Expression: [cyan]{escape(normalized or '(empty)')}[/cyan]")
    console.print(f"Query string: ?{escape(query)}", highlight=False)


# ============================================================================
# Config Commands
# ============================================================================


@config_app.command("show")
def config_show() -> None:
    """Print the active configuration as YAML."""
    import yaml

    console.print(
        yaml.dump(get_settings().to_dict(), default_flow_style=False, sort_keys=False),
        markup=False,
        highlight=False,
    )


@config_app.command("init")
def config_init(
    path: Optional[Path] = typer.Option(None, "--path", help="Where to write config.yaml"),
) -> None:
    """Write a config.yaml populated with the current settings."""
    written = get_settings().save(path)
    console.print(f"[green]Wrote {escape(str(written))}[/green]")
