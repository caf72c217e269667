"""Spreadsheet import for Reddit Media Viewer."""

from .importer import (
    detect_header_row,
    extract_feed_names,
    import_feed_names,
    read_csv_rows,
    read_rows,
    read_sheet_rows,
)

__all__ = [
    "detect_header_row",
    "extract_feed_names",
    "import_feed_names",
    "read_csv_rows",
    "read_rows",
    "read_sheet_rows",
]
