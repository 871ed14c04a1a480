"""Export mapping reports to Excel and JSON formats.

Provides two export functions:
- export_to_json: Pydantic serialization of one or more reports to a JSON file
- export_to_excel: openpyxl workbook with one mapping sheet per report plus a
  Summary sheet, with conditional formatting on the recommended action.
"""

from __future__ import annotations

import json
from pathlib import Path

from loguru import logger
from openpyxl import Workbook
from openpyxl.formatting.rule import CellIsRule
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from headermap.models.mapping import MappingAction, MappingReport


def export_to_json(reports: list[MappingReport], output_path: Path) -> Path:
    """Export mapping reports to a JSON array.

    Args:
        reports: Reports to export, one per header source.
        output_path: File path to write the JSON output.

    Returns:
        The path written.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = [report.model_dump(mode="json") for report in reports]
    output_path.write_text(json.dumps(payload, indent=2))
    logger.info("Exported {n} mapping report(s) to JSON: {path}", n=len(reports), path=output_path)
    return output_path


def export_to_excel(reports: list[MappingReport], output_path: Path) -> Path:
    """Export mapping reports to an Excel workbook.

    One "Mapping N" sheet per report with every result, the Action column
    color-coded (GREEN=auto_map, YELLOW=review, RED=manual_map), followed
    by a Summary sheet with per-report counts.

    Args:
        reports: Reports to export, one per header source.
        output_path: File path to write the .xlsx output.

    Returns:
        The path written.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)

    wb = Workbook()
    default_sheet = wb.active
    if default_sheet is not None:
        wb.remove(default_sheet)

    for idx, report in enumerate(reports, start=1):
        ws = wb.create_sheet(f"Mapping {idx}")
        _write_mapping_sheet(ws, report)

    _write_summary_sheet(wb.create_sheet("Summary"), reports)

    wb.save(output_path)
    logger.info("Exported {n} mapping report(s) to Excel: {path}", n=len(reports), path=output_path)
    return output_path


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

_MAPPING_HEADERS = [
    "Row #",
    "User Column",
    "Canonical Column",
    "Match Type",
    "Confidence",
    "Action",
    "Details",
]

_HEADER_FONT = Font(bold=True)
_GREEN_FILL = PatternFill(start_color="C6EFCE", end_color="C6EFCE", fill_type="solid")
_YELLOW_FILL = PatternFill(start_color="FFEB9C", end_color="FFEB9C", fill_type="solid")
_RED_FILL = PatternFill(start_color="FFC7CE", end_color="FFC7CE", fill_type="solid")

_COL_WIDTHS = {
    "Row #": 7,
    "User Column": 30,
    "Canonical Column": 28,
    "Match Type": 11,
    "Confidence": 11,
    "Action": 12,
    "Details": 50,
}

_ACTION_COLUMN = _MAPPING_HEADERS.index("Action") + 1


def _write_mapping_sheet(ws: Worksheet, report: MappingReport) -> None:
    """Populate one mapping sheet; the source label sits above the table."""
    ws.cell(row=1, column=1, value="Source").font = _HEADER_FONT
    ws.cell(row=1, column=2, value=report.source)

    header_row = 3
    for col_idx, header in enumerate(_MAPPING_HEADERS, start=1):
        cell = ws.cell(row=header_row, column=col_idx, value=header)
        cell.font = _HEADER_FONT
        ws.column_dimensions[get_column_letter(col_idx)].width = _COL_WIDTHS.get(header, 15)

    for row_idx, result in enumerate(report.results, start=1):
        data_row = header_row + row_idx
        ws.cell(row=data_row, column=1, value=row_idx)
        ws.cell(row=data_row, column=2, value=result.user_column)
        ws.cell(row=data_row, column=3, value=result.canonical_column)
        ws.cell(row=data_row, column=4, value=result.match_type.value)
        ws.cell(row=data_row, column=5, value=result.confidence)
        ws.cell(row=data_row, column=6, value=result.recommended_action.value)
        ws.cell(row=data_row, column=7, value=result.match_details)

    if not report.results:
        return

    last_row = header_row + len(report.results)
    last_col = get_column_letter(len(_MAPPING_HEADERS))
    ws.auto_filter.ref = f"A{header_row}:{last_col}{last_row}"

    action_col = get_column_letter(_ACTION_COLUMN)
    range_str = f"{action_col}{header_row + 1}:{action_col}{last_row}"
    for action, fill in (
        (MappingAction.AUTO_MAP, _GREEN_FILL),
        (MappingAction.REVIEW, _YELLOW_FILL),
        (MappingAction.MANUAL_MAP, _RED_FILL),
    ):
        ws.conditional_formatting.add(
            range_str,
            CellIsRule(operator="equal", formula=[f'"{action.value}"'], fill=fill),
        )


def _write_summary_sheet(ws: Worksheet, reports: list[MappingReport]) -> None:
    """Populate the Summary sheet with one row per report."""
    headers = ["Source", "Columns", "Auto Map", "Review", "Manual Map", "Unmatched Columns"]
    widths = [40, 10, 10, 10, 12, 50]
    for col_idx, (header, width) in enumerate(zip(headers, widths, strict=True), start=1):
        ws.cell(row=1, column=col_idx, value=header).font = _HEADER_FONT
        ws.column_dimensions[get_column_letter(col_idx)].width = width

    wrap_align = Alignment(wrap_text=True)
    for row_idx, report in enumerate(reports, start=2):
        ws.cell(row=row_idx, column=1, value=report.source)
        ws.cell(row=row_idx, column=2, value=len(report.results))
        ws.cell(row=row_idx, column=3, value=report.auto_map_count)
        ws.cell(row=row_idx, column=4, value=report.review_count)
        ws.cell(row=row_idx, column=5, value=report.manual_map_count)
        unmatched = ws.cell(row=row_idx, column=6, value=", ".join(report.unmatched_columns))
        unmatched.alignment = wrap_align
