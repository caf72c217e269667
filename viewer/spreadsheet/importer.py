"""Extract subreddit names from the first column of an uploaded spreadsheet."""

import csv
import io
import logging
from typing import Any, Sequence

from openpyxl import load_workbook

from viewer.errors import SpreadsheetImportError
from viewer.status import StatusReporter

logger = logging.getLogger(__name__)

# Header rows further down than this are treated as misdetections
MAX_HEADER_ROW_INDEX = 25

CSV_EXTENSION = ".csv"

Row = Sequence[Any]


def is_filled(cell: Any) -> bool:
    """A cell is filled unless it is None or an empty string."""
    return cell is not None and cell != ""


def filled_count(row: Row) -> int:
    return sum(1 for cell in row if is_filled(cell))


def read_sheet_rows(data: bytes) -> list[list[Any]]:
    """Read the first worksheet into rows, dropping fully blank rows.

    Args:
        data: Raw bytes of an .xlsx workbook

    Returns:
        Row-major cell values of the first sheet

    Raises:
        SpreadsheetImportError: If the bytes are not a readable workbook
    """
    try:
        workbook = load_workbook(io.BytesIO(data), read_only=True, data_only=True)
    except Exception as e:
        raise SpreadsheetImportError(f"Unreadable workbook: {e}") from e

    try:
        if not workbook.worksheets:
            raise SpreadsheetImportError("Workbook has no sheets")
        sheet = workbook.worksheets[0]
        # Some writers record a stale <dimension>; read-only mode would trust it
        sheet.reset_dimensions()
        rows = [list(row) for row in sheet.iter_rows(values_only=True)]
    except SpreadsheetImportError:
        raise
    except Exception as e:
        raise SpreadsheetImportError(f"Unreadable worksheet: {e}") from e
    finally:
        workbook.close()

    return [row for row in rows if any(is_filled(cell) for cell in row)]


def read_csv_rows(data: bytes) -> list[list[Any]]:
    """Read comma-separated text into rows, dropping fully blank rows.

    Raises:
        SpreadsheetImportError: If the bytes are not UTF-8 CSV text
    """
    try:
        text = data.decode("utf-8-sig")
        rows = [list(row) for row in csv.reader(io.StringIO(text, newline=""))]
    except (UnicodeDecodeError, csv.Error) as e:
        raise SpreadsheetImportError(f"Unreadable CSV: {e}") from e

    return [row for row in rows if any(is_filled(cell) for cell in row)]


def read_rows(data: bytes, filename: str | None = None) -> list[list[Any]]:
    """Dispatch on the upload's extension; anything but .csv is read as a workbook."""
    if filename and filename.lower().endswith(CSV_EXTENSION):
        return read_csv_rows(data)
    return read_sheet_rows(data)


def detect_header_row(rows: Sequence[Row]) -> int:
    """Guess which row holds column headers.

    Picks the first row with at least as many filled cells as the row after
    it. Falls back to row 0 when nothing matches or the match is implausibly
    deep in the sheet.
    """
    for index in range(len(rows) - 1):
        if filled_count(rows[index]) >= filled_count(rows[index + 1]):
            return index if index <= MAX_HEADER_ROW_INDEX else 0
    return 0


def extract_feed_names(rows: Sequence[Row]) -> list[str]:
    """Collect trimmed string values from column 0 below the header row."""
    header = detect_header_row(rows)
    names = []
    for row in rows[header + 1 :]:
        cell = row[0] if len(row) > 0 else None
        if isinstance(cell, str) and cell.strip():
            names.append(cell.strip())
    return names


def import_feed_names(
    data: bytes, status: StatusReporter, filename: str | None = None
) -> list[str]:
    """Read subreddit names from spreadsheet bytes.

    Never raises; unreadable input reports an error status and yields an
    empty list.
    """
    try:
        rows = read_rows(data, filename)
    except SpreadsheetImportError:
        logger.error("Failed to read uploaded spreadsheet", exc_info=True)
        status.set_status("Error processing Excel file", is_error=True)
        return []

    names = extract_feed_names(rows)
    if names:
        status.set_status(f"Loaded {len(names)} subreddits from Excel")
    else:
        status.set_status("No valid subreddits found in Excel file", is_error=True)
    return names
