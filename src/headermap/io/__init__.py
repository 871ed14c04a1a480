"""Header sources: workbook and delimited text readers."""

from headermap.io.csv_reader import read_csv_headers
from headermap.io.excel_reader import (
    HeaderExtractionError,
    SheetHeaders,
    WorkbookHeaders,
    extract_headers,
    save_headers_text,
)

__all__ = [
    "HeaderExtractionError",
    "SheetHeaders",
    "WorkbookHeaders",
    "extract_headers",
    "read_csv_headers",
    "save_headers_text",
]
