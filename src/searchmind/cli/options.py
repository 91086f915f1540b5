"""Shared CLI options for searchmind commands."""

from enum import Enum
from typing import Annotated

import typer

from searchmind.models import SearchType


class FormatChoice(str, Enum):
    """Output format choices for CLI."""

    PLAIN = "plain"
    JSON = "json"
    RICH = "rich"


SearchTypeOption = Annotated[
    SearchType,
    typer.Option(
        "--type",
        "-t",
        help="Source kind to search (file, fileContents, database).",
        case_sensitive=False,
    ),
]

PathOption = Annotated[
    list[str] | None,
    typer.Option(
        "--path",
        "-p",
        help="Directory or collection to search. Repeat for several.",
    ),
]

ExtensionOption = Annotated[
    list[str] | None,
    typer.Option(
        "--ext",
        "-e",
        help="Only consider files with this extension. Repeatable.",
    ),
]

CaseSensitiveOption = Annotated[
    bool,
    typer.Option("--case-sensitive", help="Match case exactly."),
]

FuzzyOption = Annotated[
    bool | None,
    typer.Option(
        "--fuzzy/--no-fuzzy",
        help="Use edit-distance matching. Defaults to config setting.",
    ),
]

PatternOption = Annotated[
    bool,
    typer.Option("--pattern", help="Count occurrences and show context."),
]

SemanticOption = Annotated[
    bool,
    typer.Option("--semantic", help="Rank by embedding similarity."),
]

MaxResultsOption = Annotated[
    int | None,
    typer.Option("--max", "-n", min=1, help="Maximum number of results."),
]

TimeoutOption = Annotated[
    float | None,
    typer.Option("--timeout", min=0.0, help="Give up after this many seconds."),
]

FormatOption = Annotated[
    FormatChoice,
    typer.Option(
        "--format",
        "-f",
        help="Output format (plain, json, rich).",
        case_sensitive=False,
    ),
]

VerboseOption = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Show debug logging and match context.",
    ),
]
