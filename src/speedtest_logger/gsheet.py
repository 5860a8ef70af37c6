"""Google Sheets sink — append rows to a named worksheet."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import gspread
from google.oauth2.service_account import Credentials

from speedtest_logger.pipeline import order_row

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]

# Grid size for newly created worksheets; appends grow it as needed.
NEW_WORKSHEET_ROWS = 1000


def load_credentials(path: Path) -> Credentials:
    """Load service-account credentials from the JSON key file at *path*."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Google credentials file not found: {path}")
    return Credentials.from_service_account_file(str(path), scopes=SCOPES)


def open_spreadsheet(credentials: Credentials, spreadsheet_id: str) -> gspread.Spreadsheet:
    client = gspread.authorize(credentials)
    return client.open_by_key(spreadsheet_id)


def find_worksheet(spreadsheet: gspread.Spreadsheet, title: str) -> gspread.Worksheet | None:
    """Return the worksheet whose title is exactly *title*, if any."""
    found = None
    for worksheet in spreadsheet.worksheets():
        if worksheet.title == title:
            found = worksheet
    return found


def find_or_create_worksheet(
    spreadsheet: gspread.Spreadsheet, title: str, header: Sequence[str]
) -> tuple[gspread.Worksheet, bool]:
    """Return ``(worksheet, created)``; new worksheets get *header* as row 1."""
    worksheet = find_worksheet(spreadsheet, title)
    if worksheet is not None:
        return worksheet, False

    worksheet = spreadsheet.add_worksheet(
        title=title, rows=NEW_WORKSHEET_ROWS, cols=max(len(header), 1)
    )
    worksheet.insert_row(list(header), index=1, value_input_option="RAW")
    return worksheet, True


def append_row(
    worksheet: gspread.Worksheet, row: Mapping[str, Any], header: Sequence[str]
) -> None:
    worksheet.append_row(order_row(row, header), value_input_option="RAW")

