"""Result rendering for the CLI."""

import json

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from searchmind.cli.options import FormatChoice
from searchmind.models import SearchResult


def results_to_json(by_term: dict[str, list[SearchResult]]) -> str:
    """Serialize results keyed by term."""
    return json.dumps(
        {term: [r.to_dict() for r in results] for term, results in by_term.items()},
        indent=2,
        ensure_ascii=False,
    )


def _build_table(term: str, results: list[SearchResult], verbose: bool) -> Table:
    show_context = verbose or any(r.context for r in results)

    table = Table(title=f"Results for '{escape(term)}'", title_justify="left")
    table.add_column("Score", justify="right", style="cyan", no_wrap=True)
    table.add_column("Type", style="dim")
    table.add_column("Path", style="green")
    if show_context:
        table.add_column("Context")

    for result in results:
        row = [
            f"{result.relevance_score:.3f}",
            result.match_type.value,
            escape(result.path),
        ]
        if show_context:
            row.append(escape(result.context or ""))
        table.add_row(*row)

    return table


def render_results(
    console: Console,
    by_term: dict[str, list[SearchResult]],
    fmt: FormatChoice,
    verbose: bool = False,
) -> None:
    """Print results for one or more terms.

    Args:
        console: Rich console used for the rich format.
        by_term: Results keyed by search term.
        fmt: Output format.
        verbose: Always show the context column.
    """
    if fmt == FormatChoice.JSON:
        typer.echo(results_to_json(by_term))
        return

    for term, results in by_term.items():
        if fmt == FormatChoice.PLAIN:
            for result in results:
                line = f"{result.relevance_score:.3f}\t{result.path}"
                if result.context and verbose:
                    line += f"\t{result.context}"
                typer.echo(line)
            continue

        if not results:
            console.print(f"[dim]No matches for '{escape(term)}'[/dim]")
            continue
        console.print(_build_table(term, results, verbose))
        console.print(f"[dim]{len(results)} results[/dim]\n")
