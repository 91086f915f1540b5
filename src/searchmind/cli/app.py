"""Main CLI application for searchmind."""

import asyncio
from collections.abc import Awaitable, Callable

import typer
from rich.console import Console

from searchmind import __version__
from searchmind.api import SearchMind
from searchmind.cli.options import (
    CaseSensitiveOption,
    ExtensionOption,
    FormatChoice,
    FormatOption,
    FuzzyOption,
    MaxResultsOption,
    PathOption,
    PatternOption,
    SearchTypeOption,
    SemanticOption,
    TimeoutOption,
    VerboseOption,
)
from searchmind.cli.output import render_results
from searchmind.config import SearchMindConfig, get_config
from searchmind.config.defaults import get_config_path
from searchmind.exceptions import SearchMindError
from searchmind.models import SearchOptions, SearchResult, SearchType
from searchmind.utils.logging import setup_logging

app = typer.Typer(
    name="searchmind",
    help="Search file names, file contents and remote records.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"searchmind version {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Search file names, file contents and remote records."""


def _prepare(verbose: bool) -> SearchMindConfig:
    config = get_config()
    setup_logging(
        level="DEBUG" if verbose else config.logging.level,
        log_file=config.logging.file,
        json_format=config.logging.json_format,
    )
    return config


def _build_options(
    config: SearchMindConfig,
    *,
    paths: list[str] | None,
    extensions: list[str] | None,
    case_sensitive: bool,
    fuzzy: bool | None,
    pattern: bool,
    semantic: bool,
    max_results: int | None,
    timeout: float | None,
) -> SearchOptions:
    return config.search.to_options(
        api_key=config.embedding.api_key,
        search_paths=paths or None,
        file_extensions=extensions or None,
        case_sensitive=case_sensitive or None,
        fuzzy_matching=fuzzy,
        pattern_match=pattern or None,
        semantic=semantic or None,
        max_results=max_results,
        timeout=timeout,
    )


def _run(
    config: SearchMindConfig,
    work: Callable[[SearchMind], Awaitable[dict[str, list[SearchResult]]]],
) -> dict[str, list[SearchResult]]:
    async def runner() -> dict[str, list[SearchResult]]:
        mind = SearchMind.from_config(config)
        try:
            return await work(mind)
        finally:
            await mind.aclose()

    try:
        return asyncio.run(runner())
    except SearchMindError as e:
        err_console.print(f"[red]Error:[/red] {e.user_message}")
        err_console.print(f"[dim]{e}[/dim]")
        raise typer.Exit(e.exit_code) from None


@app.command()
def search(
    term: str = typer.Argument(..., help="Term to search for."),
    search_type: SearchTypeOption = SearchType.FILE,
    paths: PathOption = None,
    extensions: ExtensionOption = None,
    case_sensitive: CaseSensitiveOption = False,
    fuzzy: FuzzyOption = None,
    pattern: PatternOption = False,
    semantic: SemanticOption = False,
    max_results: MaxResultsOption = None,
    timeout: TimeoutOption = None,
    format: FormatOption = FormatChoice.RICH,
    verbose: VerboseOption = False,
) -> None:
    """Search for a single term."""
    config = _prepare(verbose)
    options = _build_options(
        config,
        paths=paths,
        extensions=extensions,
        case_sensitive=case_sensitive,
        fuzzy=fuzzy,
        pattern=pattern,
        semantic=semantic,
        max_results=max_results,
        timeout=timeout,
    )

    async def work(mind: SearchMind) -> dict[str, list[SearchResult]]:
        return {term: await mind.search(term, search_type, options)}

    render_results(console, _run(config, work), format, verbose)


@app.command()
def multi(
    terms: list[str] = typer.Argument(..., help="Terms to search for."),
    search_type: SearchTypeOption = SearchType.FILE,
    paths: PathOption = None,
    extensions: ExtensionOption = None,
    case_sensitive: CaseSensitiveOption = False,
    fuzzy: FuzzyOption = None,
    pattern: PatternOption = False,
    semantic: SemanticOption = False,
    max_results: MaxResultsOption = None,
    timeout: TimeoutOption = None,
    format: FormatOption = FormatChoice.RICH,
    verbose: VerboseOption = False,
) -> None:
    """Search several terms concurrently."""
    config = _prepare(verbose)
    options = _build_options(
        config,
        paths=paths,
        extensions=extensions,
        case_sensitive=case_sensitive,
        fuzzy=fuzzy,
        pattern=pattern,
        semantic=semantic,
        max_results=max_results,
        timeout=timeout,
    )

    async def work(mind: SearchMind) -> dict[str, list[SearchResult]]:
        return await mind.multi_search(terms, search_type, options)

    render_results(console, _run(config, work), format, verbose)


@app.command("config")
def config_cmd(
    show_path: bool = typer.Option(
        False,
        "--path",
        help="Show config file path.",
    ),
) -> None:
    """Show current configuration."""
    if show_path:
        console.print(str(get_config_path()))
        return

    try:
        config = get_config()
    except SearchMindError as e:
        err_console.print(f"[red]Error:[/red] {e.user_message}")
        raise typer.Exit(e.exit_code) from None

    console.print("[bold]searchmind configuration[/bold]\n")
    console.print(f"Config file: {get_config_path()}")
    console.print(f"Embedder: {config.embedding.provider.value} ({config.embedding.model})")
    console.print(f"API key: {'set' if config.embedding.api_key else 'not set'}")
    console.print(f"Database: {config.database.base_url or 'not configured'}")

    console.print("\n[bold]Search defaults:[/bold]")
    for key, value in config.search.model_dump().items():
        console.print(f"  {key}: {value}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
