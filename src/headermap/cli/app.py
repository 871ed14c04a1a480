"""headermap CLI application entry point.

Provides commands for inspecting the schema catalog, mapping column
headers onto it, ranking candidate columns, and extracting headers from
workbooks and CSV files.

Usage:
    headermap schema
    headermap map <header>...
    headermap top <header>
    headermap extract-headers <workbook>
    headermap map-file <workbook-or-csv>
    headermap interactive
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger
from rich.console import Console

from headermap.matching.matcher import HeaderMatcher
from headermap.models.config import MatchingConfig
from headermap.models.schema import SchemaCatalog

app = typer.Typer(
    name="headermap",
    help="Map free-form column headers onto a canonical schema with confidence scores.",
    no_args_is_help=True,
)

console = Console()

SchemaDirOption = Annotated[
    Path | None,
    typer.Option("--schema-dir", "-s", help="Directory with *-alias.json schema documents"),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="JSON file with matching thresholds"),
]
MinScoreOption = Annotated[
    int | None,
    typer.Option(
        "--min-score",
        min=0,
        max=100,
        help="Minimum fuzzy score (0-100); overrides the config file",
    ),
]


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging on stderr"),
    ] = False,
) -> None:
    """Configure logging for all commands."""
    logger.remove()
    logger.add(_stderr_sink, level="DEBUG" if verbose else "WARNING")


@app.command()
def version() -> None:
    """Show the current version."""
    from headermap import __version__

    console.print(f"headermap {__version__}")


@app.command()
def schema(schema_dir: SchemaDirOption = None) -> None:
    """List the canonical columns of the schema catalog."""
    from headermap.cli.display import display_catalog

    catalog = _load_catalog(schema_dir)
    display_catalog(catalog, console)


@app.command(name="map")
def map_cmd(
    headers: Annotated[
        list[str],
        typer.Argument(help="Column headers to map"),
    ],
    schema_dir: SchemaDirOption = None,
    config: ConfigOption = None,
    min_score: MinScoreOption = None,
) -> None:
    """Map column headers onto canonical columns.

    Each header goes through exact, alias, then fuzzy matching and gets a
    recommended action (auto_map, review, manual_map).
    """
    from headermap.cli.display import display_mapping_results, display_report_summary
    from headermap.models.mapping import summarize_results

    matcher = _build_matcher(schema_dir, config, min_score)
    results = matcher.map_headers(headers)

    display_mapping_results(results, console)
    display_report_summary(summarize_results("command line", results), console)


@app.command()
def top(
    header: Annotated[
        str,
        typer.Argument(help="Column header to rank candidates for"),
    ],
    n: Annotated[
        int,
        typer.Option("--n", "-n", min=0, help="Number of candidates to show"),
    ] = 3,
    schema_dir: SchemaDirOption = None,
    config: ConfigOption = None,
    min_score: MinScoreOption = None,
) -> None:
    """Show the best candidate canonical columns for one header."""
    from headermap.cli.display import display_top_matches

    matcher = _build_matcher(schema_dir, config, min_score)
    display_top_matches(header, matcher.top_matches(header, n), console)


@app.command(name="extract-headers")
def extract_headers_cmd(
    workbook: Annotated[
        Path,
        typer.Argument(help="Excel workbook (.xlsx) to read headers from"),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the header listing to this text file"),
    ] = None,
) -> None:
    """Extract column headers from every sheet of a workbook.

    Detects multi-row headers and resolves merged group cells.
    """
    from headermap.cli.display import display_workbook_headers
    from headermap.io.excel_reader import (
        HeaderExtractionError,
        extract_headers,
        save_headers_text,
    )

    try:
        result = extract_headers(workbook)
    except (FileNotFoundError, HeaderExtractionError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=1) from e

    display_workbook_headers(result, console)

    if output is not None:
        save_headers_text(result, output)
        console.print(f"\n[green]Headers written to {output}[/green]")


@app.command(name="map-file")
def map_file(
    source: Annotated[
        Path,
        typer.Argument(help="Workbook (.xlsx/.xlsm) or delimited text file (.csv/.tsv/.txt)"),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Export results to .json or .xlsx"),
    ] = None,
    schema_dir: SchemaDirOption = None,
    config: ConfigOption = None,
    min_score: MinScoreOption = None,
) -> None:
    """Read the headers of one file and map them onto canonical columns.

    Workbooks are mapped sheet by sheet.
    """
    from headermap.cli.display import display_mapping_results, display_report_summary
    from headermap.io.csv_reader import read_csv_headers
    from headermap.io.excel_reader import HeaderExtractionError, extract_headers
    from headermap.matching.exporters import export_to_excel, export_to_json
    from headermap.models.mapping import MappingReport, summarize_results

    if output is not None and output.suffix.lower() not in (".json", ".xlsx"):
        console.print(
            f"[bold red]Error:[/bold red] Unsupported output format '{output.suffix}' "
            "(use .json or .xlsx)"
        )
        raise typer.Exit(code=1)

    matcher = _build_matcher(schema_dir, config, min_score)

    suffix = source.suffix.lower()
    reports: list[MappingReport] = []
    try:
        if suffix in (".xlsx", ".xlsm"):
            workbook = extract_headers(source)
            for sheet in workbook.sheets:
                label = f"{source.name} / {sheet.sheet_name}"
                reports.append(summarize_results(label, matcher.map_headers(sheet.headers)))
        elif suffix in (".csv", ".tsv", ".txt"):
            headers = read_csv_headers(source, sep="\t" if suffix == ".tsv" else None)
            reports.append(summarize_results(source.name, matcher.map_headers(headers)))
        else:
            console.print(
                f"[bold red]Error:[/bold red] Unsupported file type '{source.suffix}'"
            )
            raise typer.Exit(code=1)
    except (FileNotFoundError, HeaderExtractionError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=1) from e

    for report in reports:
        console.print()
        display_mapping_results(report.results, console, title=report.source)
        display_report_summary(report, console)

    if output is not None:
        if output.suffix.lower() == ".json":
            export_to_json(reports, output)
        else:
            export_to_excel(reports, output)
        console.print(f"\n[green]Mapping results written to {output}[/green]")


@app.command()
def interactive(
    n: Annotated[
        int,
        typer.Option("--n", "-n", min=1, help="Number of candidates to show per header"),
    ] = 3,
    schema_dir: SchemaDirOption = None,
    config: ConfigOption = None,
    min_score: MinScoreOption = None,
) -> None:
    """Prompt for headers and show ranked candidates until 'quit'."""
    from headermap.cli.display import display_top_matches

    matcher = _build_matcher(schema_dir, config, min_score)
    console.print(
        f"Loaded [bold]{len(matcher.catalog)}[/bold] canonical columns. "
        "Enter column headers to map (blank or 'quit' to exit)."
    )

    while True:
        header = typer.prompt("User column", default="", show_default=False)
        if not header.strip() or header.strip().lower() == "quit":
            break
        display_top_matches(header, matcher.top_matches(header, n), console)

    console.print("[green]Done.[/green]")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _stderr_sink(message: str) -> None:
    # sys.stderr is looked up on every write; callers may swap it after startup.
    sys.stderr.write(message)


def _load_catalog(schema_dir: Path | None) -> SchemaCatalog:
    """Load the catalog from a directory, or the bundled sample catalog."""
    from headermap.reference.loader import (
        SchemaLoadError,
        load_all_schemas,
        load_bundled_catalog,
    )

    try:
        catalog = load_bundled_catalog() if schema_dir is None else load_all_schemas(schema_dir)
    except (FileNotFoundError, SchemaLoadError) as e:
        console.print(f"[bold red]Error loading schema:[/bold red] {e}")
        raise typer.Exit(code=1) from e

    if len(catalog) == 0:
        console.print("[yellow]Warning:[/yellow] schema catalog is empty, nothing will match")
    return catalog


def _load_config(config_path: Path | None, min_score: int | None) -> MatchingConfig:
    """Build the matching config from an optional file and CLI override."""
    from headermap.reference.loader import SchemaLoadError, load_matching_config

    try:
        config = MatchingConfig() if config_path is None else load_matching_config(config_path)
    except (FileNotFoundError, SchemaLoadError) as e:
        console.print(f"[bold red]Error loading config:[/bold red] {e}")
        raise typer.Exit(code=1) from e

    if min_score is not None:
        config = config.model_copy(update={"fuzzy_min_threshold": min_score})
    return config


def _build_matcher(
    schema_dir: Path | None,
    config_path: Path | None,
    min_score: int | None,
) -> HeaderMatcher:
    catalog = _load_catalog(schema_dir)
    return HeaderMatcher(catalog, _load_config(config_path, min_score))
