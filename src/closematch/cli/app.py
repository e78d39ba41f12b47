"""Main CLI application."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any

import typer

from closematch import __version__
from closematch.cli.context import CLIContext
from closematch.cli.formatters import (
    print_did_you_mean,
    print_error,
    print_info,
    print_options_table,
    print_warning,
)
from closematch.infrastructure.candidates import load_candidates
from closematch.infrastructure.config import options_to_dict
from closematch.infrastructure.keys import extract_key
from closematch.infrastructure.logging import configure_logging
from closematch.modules.matching import (
    ClosematchError,
    MatchOptions,
    Matcher,
    ReturnType,
    ThresholdType,
)

# Exit codes
EXIT_NO_MATCH = 1
EXIT_ERROR = 2

# Main application
app = typer.Typer(
    name="closematch",
    help="Suggest the closest matches for a possibly misspelled string.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"closematch {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(  # noqa: ARG001 - handled by callback
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug output.",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only print matches.",
    ),
    log_json: bool = typer.Option(
        False,
        "--log-json",
        help="Emit debug logs as JSON lines.",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        envvar="CLOSEMATCH_CONFIG",
        help="JSON or YAML file with default matching options.",
    ),
) -> None:
    """closematch: "did you mean?" suggestions by edit distance or similarity."""
    configure_logging(debug=verbose, json_logs=log_json)

    ctx = CLIContext.get()
    ctx.verbose = verbose
    ctx.quiet = quiet
    ctx.config_path = config
    ctx.options = None


def _build_options(overrides: dict[str, Any]) -> MatchOptions:
    """Apply command-line overrides to the options file defaults."""
    given = {name: value for name, value in overrides.items() if value is not None}
    return CLIContext.get().get_options().with_overrides(**given)


def _display_name(item: Any, options: MatchOptions) -> str:
    if isinstance(item, str) or options.match_path:
        return extract_key(item, options)
    return str(item)


@app.command("suggest")
def suggest(
    value: Annotated[str, typer.Argument(help="String to find matches for")],
    candidates: Annotated[
        list[str] | None,
        typer.Argument(help="Candidate strings"),
    ] = None,
    file: Annotated[
        Path | None,
        typer.Option(
            "--file",
            "-f",
            help="Read candidates from a file (.json/.yaml list, or one per line)",
        ),
    ] = None,
    threshold: Annotated[
        float | None,
        typer.Option(
            "--threshold", "-t", help="Maximum distance or minimum similarity"
        ),
    ] = None,
    threshold_type: Annotated[
        ThresholdType | None,
        typer.Option("--threshold-type", help="Scoring metric"),
    ] = None,
    return_type: Annotated[
        ReturnType | None,
        typer.Option("--return-type", "-r", help="Result selection strategy"),
    ] = None,
    case_sensitive: Annotated[
        bool,
        typer.Option("--case-sensitive", help="Do not fold case before comparing"),
    ] = False,
    no_deburr: Annotated[
        bool,
        typer.Option("--no-deburr", help="Keep diacritics when comparing"),
    ] = False,
    no_trim_spaces: Annotated[
        bool,
        typer.Option("--no-trim-spaces", help="Keep repeated whitespace"),
    ] = False,
    match_path: Annotated[
        str | None,
        typer.Option(
            "--match-path", help="Dotted path to the key of structured candidates"
        ),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Print the result as JSON"),
    ] = False,
) -> None:
    """Suggest candidates that closely match VALUE.

    Exits with status 1 when nothing matches.

    \b
    Examples:
        closematch suggest aple apple orange grape
        closematch suggest aple -f fruits.txt -r all-sorted-matches
        closematch suggest aple apple apel --threshold-type edit-distance -t 1
        closematch suggest bob -f users.yaml --match-path name --json
    """
    try:
        options = _build_options(
            {
                "threshold": threshold,
                "threshold_type": threshold_type,
                "return_type": return_type,
                "case_sensitive": True if case_sensitive else None,
                "deburr": False if no_deburr else None,
                "trim_spaces": False if no_trim_spaces else None,
                "match_path": match_path,
            }
        )
        items: list[Any] = list(candidates or [])
        if file is not None:
            items.extend(load_candidates(file))

        result = Matcher(options).match(value, items)
    except ClosematchError as e:
        print_error(str(e))
        raise typer.Exit(EXIT_ERROR) from e

    if result is None:
        matched: list[Any] = []
    elif options.return_type.is_single:
        matched = [result]
    else:
        matched = result

    if json_output:
        typer.echo(json.dumps(result, ensure_ascii=False, default=str))
    elif matched:
        print_did_you_mean([_display_name(item, options) for item in matched])
    else:
        print_warning(f"No match for '{value}'")

    if not matched:
        raise typer.Exit(EXIT_NO_MATCH)


@app.command("options")
def show_options(
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Print the options as JSON"),
    ] = False,
) -> None:
    """Show the effective default matching options."""
    ctx = CLIContext.get()
    try:
        options = ctx.get_options()
    except ClosematchError as e:
        print_error(str(e))
        raise typer.Exit(EXIT_ERROR) from e

    data = options_to_dict(options)
    if json_output:
        typer.echo(json.dumps(data, indent=2))
        return

    if ctx.config_path is not None:
        print_info(f"Options file: {ctx.config_path}")
    print_options_table(data)
