"""Rich display helpers for terminal output.

Provides formatted display functions for the schema catalog, mapping
results, ranked candidates, and extracted workbook headers using Rich
tables and panels.
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from headermap.io.excel_reader import WorkbookHeaders
from headermap.models.mapping import MappingAction, MappingReport, MappingResult, MatchType
from headermap.models.schema import SchemaCatalog


def display_catalog(catalog: SchemaCatalog, console: Console) -> None:
    """Print every canonical column in catalog order.

    Required fields are shown in red, optional fields in green.

    Args:
        catalog: Schema catalog to display.
        console: Rich Console for output.
    """
    table = Table(title="Canonical Columns", show_lines=True)
    table.add_column("#", justify="right", style="dim", width=4)
    table.add_column("Canonical Name", style="bold cyan", no_wrap=True)
    table.add_column("Description", max_width=40)
    table.add_column("Type", no_wrap=True)
    table.add_column("Required", no_wrap=True)
    table.add_column("Aliases", max_width=40)

    for idx, entry in enumerate(catalog, start=1):
        table.add_row(
            str(idx),
            entry.canonical_name,
            entry.description,
            entry.data_type,
            _format_required(entry.required),
            ", ".join(entry.aliases),
        )

    console.print(table)
    console.print(
        f"\n[bold]{len(catalog)}[/bold] canonical columns "
        f"([red]{len(catalog.required_entries())} required[/red])"
    )


def display_mapping_results(
    results: list[MappingResult],
    console: Console,
    title: str = "Column Mapping",
) -> None:
    """Print mapping results with color-coded confidence and action.

    Args:
        results: Mapping results in header order.
        console: Rich Console for output.
        title: Table title.
    """
    table = Table(title=title, show_lines=True)
    table.add_column("#", justify="right", style="dim", width=4)
    table.add_column("User Column", style="bold", no_wrap=True)
    table.add_column("Canonical Column", style="cyan", no_wrap=True)
    table.add_column("Match", no_wrap=True)
    table.add_column("Confidence", justify="right")
    table.add_column("Action", no_wrap=True)
    table.add_column("Details", max_width=50)

    for idx, r in enumerate(results, start=1):
        canonical = r.canonical_column if r.match_type != MatchType.NO_MATCH else "-"
        table.add_row(
            str(idx),
            r.user_column,
            canonical,
            r.match_type.value,
            f"{r.confidence:.0%}",
            _format_action(r.recommended_action),
            r.match_details,
        )

    console.print(table)


def display_top_matches(header: str, results: list[MappingResult], console: Console) -> None:
    """Print ranked candidates for one header.

    Args:
        header: The user header that was ranked.
        results: Ranked candidates, best first.
        console: Rich Console for output.
    """
    if not results:
        console.print(f"[yellow]No matches found for '{header}'[/yellow]")
        return

    table = Table(title=f"Top Matches: {header}", show_lines=True)
    table.add_column("Rank", justify="right", style="dim", width=5)
    table.add_column("Canonical Column", style="bold cyan", no_wrap=True)
    table.add_column("Confidence", justify="right")
    table.add_column("Action", no_wrap=True)
    table.add_column("Details", max_width=50)

    for rank, r in enumerate(results, start=1):
        table.add_row(
            str(rank),
            r.canonical_column,
            f"{r.confidence:.0%}",
            _format_action(r.recommended_action),
            r.match_details,
        )

    console.print(table)


def display_report_summary(report: MappingReport, console: Console) -> None:
    """Print a one-panel action summary for a mapping report."""
    info_lines = [
        f"[bold]Columns:[/bold] {len(report.results)}",
        f"[green]Auto map: {report.auto_map_count}[/green]  "
        f"[yellow]Review: {report.review_count}[/yellow]  "
        f"[red]Manual map: {report.manual_map_count}[/red]",
    ]
    if report.unmatched_columns:
        info_lines.append(f"[dim]Unmatched:[/dim] {', '.join(report.unmatched_columns)}")
    console.print(Panel("\n".join(info_lines), title=f"Summary: {report.source}"))


def display_workbook_headers(result: WorkbookHeaders, console: Console) -> None:
    """Print extracted headers, one table per sheet.

    Args:
        result: Extraction result for one workbook.
        console: Rich Console for output.
    """
    console.print(Panel(f"[bold]File:[/bold] {result.file_path}", title="Workbook Headers"))

    for sheet in result.sheets:
        table = Table(
            title=f"Sheet: {sheet.sheet_name} ({sheet.header_row_count} header row(s))",
            show_lines=False,
        )
        table.add_column("#", justify="right", style="dim", width=4)
        table.add_column("Header", style="bold")
        for idx, header in enumerate(sheet.headers, start=1):
            table.add_row(str(idx), header)
        console.print(table)
        console.print(f"[bold]{len(sheet.headers)}[/bold] columns\n")


def _format_action(action: MappingAction) -> Text:
    """Format a recommended action with color coding."""
    if action == MappingAction.AUTO_MAP:
        return Text("auto_map", style="green")
    elif action == MappingAction.REVIEW:
        return Text("review", style="yellow")
    else:
        return Text("manual_map", style="bold red")


def _format_required(required: bool) -> Text:
    if required:
        return Text("Req", style="bold red")
    return Text("Opt", style="green")
